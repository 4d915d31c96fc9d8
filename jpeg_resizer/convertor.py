from pathlib import Path
from typing import Optional, Tuple

import piexif
from loguru import logger
from PIL import Image

from jpeg_resizer.resizing import crop_and_resize

# Modes the JPEG encoder writes as they are
JPEG_MODES = {'RGB', 'L', 'CMYK'}


def validate_quality(quality: int) -> None:
    if not isinstance(quality, int):
        raise TypeError(f"quality must be an integer, got {type(quality).__name__}")
    if quality < 0 or quality > 100:
        raise ValueError("quality must be between 0 and 100.")


def load_image(path: Path) -> Image.Image:
    with Image.open(path) as img:
        img.load()
        if img.mode in JPEG_MODES:
            return img.copy()
        return img.convert('RGB')


def exif_for_output(image: Image.Image) -> Optional[bytes]:
    exif_bytes = image.info.get('exif')
    if not exif_bytes:
        return None
    try:
        exif_dict = piexif.load(exif_bytes)
        exif_dict['Exif'][piexif.ExifIFD.PixelXDimension] = image.width
        exif_dict['Exif'][piexif.ExifIFD.PixelYDimension] = image.height
        # The old thumbnail no longer matches the picture
        exif_dict['1st'] = {}
        exif_dict['thumbnail'] = None
        return piexif.dump(exif_dict)
    except Exception as e:
        logger.debug(f"Dropping unreadable EXIF: {e}")
        return None


def _dpi(image: Image.Image) -> Optional[Tuple[int, int]]:
    dpi = image.info.get('dpi')
    if not dpi:
        return None
    return round(float(dpi[0])), round(float(dpi[1]))


def save_jpeg(
        path: Path,
        image: Image.Image,
        quality: int,
        exif: Optional[bytes] = None
) -> None:
    """Save ``image`` as a JPEG file at ``path``.

    ``quality`` goes from 0 to 100, 100 being the best. It is checked
    before anything is written. The parent directory must exist.
    """
    validate_quality(quality)

    params = {'quality': quality}
    dpi = _dpi(image)
    if dpi:
        params['dpi'] = dpi
    if exif:
        params['exif'] = exif
    image.save(path, format='JPEG', **params)


def convert_file(
        source: Path,
        target: Path,
        quality: int,
        size: Optional[Tuple[int, int]] = None,
        strict: bool = False
) -> bool:
    validate_quality(quality)

    image = None
    writing = False
    try:
        image = load_image(source)
        if size is not None:
            resized = crop_and_resize(image, *size)
            image.close()
            image = resized
            exif = None
        else:
            exif = exif_for_output(image)
        target.parent.mkdir(parents=True, exist_ok=True)
        writing = True
        save_jpeg(target, image, quality, exif=exif)
        return True
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        if writing and target.is_file():
            # Leave no half written file behind
            target.unlink(missing_ok=True)
        if strict:
            raise
        logger.error(f"Failed to convert {target}")
        logger.error(f"Error: {e}")
        return False
    finally:
        if image is not None:
            image.close()

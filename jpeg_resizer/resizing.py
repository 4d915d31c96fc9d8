import math
from typing import Tuple

from PIL import Image

Box = Tuple[int, int, int, int]


def crop_box(source_size: Tuple[int, int], target_size: Tuple[int, int]) -> Box:
    """Region of the source that matches the target aspect ratio.

    Landscape sources are cropped around the horizontal centre. Other
    sources keep their top-left corner, so the box can be wider than the
    image when the target is wider than it is tall.
    """
    source_width, source_height = source_size
    width, height = target_size
    ratio = width / height

    crop_width = max(1, math.floor(source_height * ratio))
    if source_width > source_height:
        offset_x = (source_width - crop_width) // 2
    else:
        offset_x = 0
    return offset_x, 0, offset_x + crop_width, source_height


def _wrap_region(image: Image.Image, box: Box) -> Image.Image:
    # Out of bounds pixels repeat the image (tile wrap)
    left, top, right, bottom = box
    width, height = image.size
    region = Image.new(image.mode, (right - left, bottom - top))
    for y in range(top - top % height, bottom, height):
        for x in range(left - left % width, right, width):
            region.paste(image, (x - left, y - top))
    return region


def crop_and_resize(image: Image.Image, width: int, height: int) -> Image.Image:
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {width}x{height}")

    box = crop_box(image.size, (width, height))
    left, top, right, bottom = box
    if left < 0 or top < 0 or right > image.width or bottom > image.height:
        with _wrap_region(image, box) as region:
            resized = region.resize((width, height), Image.Resampling.BICUBIC)
    else:
        resized = image.resize((width, height), Image.Resampling.BICUBIC, box=box)

    if 'dpi' in image.info:
        resized.info['dpi'] = image.info['dpi']
    return resized

from pathlib import Path
from typing import Set

from loguru import logger

SUPPORTED_EXTENSIONS = {'.jpg', '.jpeg', '.gif', '.png', '.tiff', '.bmp'}


def file_extension(file: Path) -> str:
    """Extension as written on disk, with the dot.

    A name that only has a leading dot, such as '.bashrc' or '.png', is
    all extension.
    """
    if file.suffix:
        return file.suffix
    if file.name.startswith('.') and len(file.name) > 1:
        return file.name
    return ''


def is_supported(extension: str) -> bool:
    # Case-sensitive: '.JPG' is not in the set
    return extension in SUPPORTED_EXTENSIONS


class UnsupportedExtensions:
    """Extensions already reported as unsupported during one run."""

    def __init__(self):
        self.seen: Set[str] = set()

    def report(self, extension: str) -> bool:
        if extension in self.seen:
            return False
        self.seen.add(extension)
        logger.warning(f"Not supported: {extension}")
        return True

    def __contains__(self, extension: str) -> bool:
        return extension in self.seen

    def __len__(self) -> int:
        return len(self.seen)

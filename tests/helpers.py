from pathlib import Path

from loguru import logger
from PIL import Image


def make_image(path: Path, size=(64, 48), color=(200, 30, 30), mode='RGB', **save_kwargs) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with Image.new(mode, size, color) as img:
        img.save(path, **save_kwargs)
    return path


class LogCapture:
    """Collects loguru messages while it is open."""

    def __init__(self, level='DEBUG'):
        self.level = level
        self.messages = []
        self._sink_id = None

    def __enter__(self):
        self._sink_id = logger.add(lambda m: self.messages.append(m.record['message']), level=self.level)
        return self

    def __exit__(self, *exc):
        logger.remove(self._sink_id)

    def count(self, message: str) -> int:
        return self.messages.count(message)

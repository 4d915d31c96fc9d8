import os
import sys
from fnmatch import fnmatch
from pathlib import Path
from typing import Callable, Iterator, Literal, Optional

from jpeg_resizer.filtering import file_extension

OutputStrategy = Literal['app', 'cwd']


def _raise(error: OSError):
    raise error


def collect_files(
        path: str | Path,
        mask: Optional[str] = '*',
        check_file: Optional[Callable[[Path], bool]] = None
) -> Iterator[Path]:
    """Yield every file below ``path`` whose name matches ``mask``.

    Files come out in the order the filesystem lists them. ``check_file``
    can reject files by their metadata; without it every file passes.
    A missing or unreadable root raises when iteration starts.
    """
    if not mask:
        mask = '*'
    root = Path(path).absolute()
    if not root.exists():
        raise FileNotFoundError(f"Input path does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Input path is not a directory: {root}")

    for dirpath, dir_names, filenames in os.walk(root, onerror=_raise):
        for f in filenames:
            if not fnmatch(f, mask):
                continue
            full_path = Path(dirpath) / f
            if check_file is None or check_file(full_path):
                yield full_path


def relative_folder(file: Path, root: str | Path) -> Path:
    return file.parent.relative_to(Path(root).absolute())


def output_target(file: Path, root: str | Path, output_root: Path) -> Path:
    stem = file.name[:len(file.name) - len(file_extension(file))]
    return output_root / relative_folder(file, root) / (stem + '.jpg')


def get_root_directory() -> Path:
    if getattr(sys, 'frozen', False):
        # Bundled with PyInstaller
        return Path(sys.executable).parent
    return Path(__file__).resolve().parents[1]


def resolve_output_root(
        strategy: OutputStrategy = 'app',
        output: Optional[str | Path] = None
) -> Path:
    if output is not None:
        return Path(output).absolute()
    if strategy == 'app':
        return get_root_directory() / 'output'
    if strategy == 'cwd':
        return Path.cwd() / 'output'
    raise ValueError(f"Unknown output strategy: {strategy}")

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger
from tqdm import tqdm

from jpeg_resizer.common import (OutputStrategy, collect_files, output_target,
                                 resolve_output_root)
from jpeg_resizer.convertor import convert_file, validate_quality
from jpeg_resizer.filtering import UnsupportedExtensions, file_extension, is_supported


@dataclass
class Options:
    quality: int = 0
    size: Optional[Tuple[int, int]] = None  # (width, height), None keeps the source size
    strict: bool = False
    output_strategy: OutputStrategy = 'app'
    output: Optional[Path] = None  # overrides output_strategy
    progress: bool = False

    def __post_init__(self):
        validate_quality(self.quality)
        if self.size is not None:
            width, height = self.size
            if width <= 0 or height <= 0:
                raise ValueError(f"Target size must be positive, got {width}x{height}")


@dataclass
class RunSummary:
    output_root: Path
    unsupported: UnsupportedExtensions
    converted: int = 0
    failed: int = 0
    skipped: int = 0
    failures: List[Path] = field(default_factory=list)


def prepare_output(options: Options) -> Path:
    output_root = resolve_output_root(options.output_strategy, options.output)
    output_root.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output folder: {output_root}")
    return output_root


def convert_directories(
        paths: List[str | Path],
        options: Options,
        unsupported: Optional[UnsupportedExtensions] = None
) -> RunSummary:
    if not paths:
        logger.warning("Provide a path")

    output_root = prepare_output(options)
    if unsupported is None:
        unsupported = UnsupportedExtensions()
    summary = RunSummary(output_root=output_root, unsupported=unsupported)

    for path in paths:
        logger.debug(f"Converting files under {path}")
        # Listed up front so files written below are never picked up
        files = list(collect_files(path))
        for file in tqdm(files, desc=f"Converting {Path(path).name}", unit="file", total=len(files),
                         disable=not options.progress):
            ext = file_extension(file)
            if not is_supported(ext):
                unsupported.report(ext)
                summary.skipped += 1
                continue

            target = output_target(file, path, output_root)
            if convert_file(file, target, options.quality, options.size, options.strict):
                summary.converted += 1
            else:
                summary.failed += 1
                summary.failures.append(file)
            logger.debug(f"processed {file}")

    logger.info(f"{summary.converted} converted, {summary.failed} failed, {summary.skipped} skipped")
    return summary

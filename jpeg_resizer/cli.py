import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger
from tqdm import tqdm

from jpeg_resizer.generate import Options, convert_directories


def parse_size(value: str) -> Tuple[int, int]:
    try:
        width, height = (int(v) for v in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return width, height


def parse_quality(value: str) -> int:
    try:
        quality = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if quality < 0 or quality > 100:
        raise argparse.ArgumentTypeError("quality must be between 0 and 100.")
    return quality


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jpeg-resizer",
        description="Convert the images under the given directories to JPEG, "
                    "mirroring the folder structure in an output folder.")
    parser.add_argument("paths", nargs="*", type=Path, help="input directories")
    parser.add_argument("-q", "--quality", type=parse_quality, default=0,
                        help="JPEG quality from 0 to 100 (default: 0)")
    parser.add_argument("--size", type=parse_size, default=None, metavar="WxH",
                        help="crop to the aspect ratio of WxH and resize to it")
    parser.add_argument("--strict", action="store_true",
                        help="stop at the first file that fails to convert")
    parser.add_argument("--output-strategy", choices=["app", "cwd"], default="app",
                        help="create 'output' next to the program (app) or in the "
                             "working directory (cwd)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="output folder, overrides --output-strategy")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every processed file")
    parser.add_argument("--log-file", type=Path, default=None, help="also log to this file")
    return parser


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    logger.remove()
    # tqdm.write keeps log lines from breaking the progress bar
    logger.add(lambda msg: tqdm.write(msg, end="", file=sys.stderr),
               format="{message}", level="DEBUG" if verbose else "INFO", colorize=False)
    if log_file is not None:
        logger.add(str(log_file), rotation="10 MB", level="DEBUG")


@logger.catch(onerror=lambda _: sys.exit(1))
def run(args: argparse.Namespace) -> None:
    options = Options(
        quality=args.quality,
        size=args.size,
        strict=args.strict,
        output_strategy=args.output_strategy,
        output=args.output,
        progress=args.progress,
    )
    convert_directories(args.paths, options)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())

import sys

from jpeg_resizer.cli import main

if __name__ == "__main__":
    sys.exit(main())

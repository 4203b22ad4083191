import sys

from docmark.cli import main

if __name__ == "__main__":
    sys.exit(main())

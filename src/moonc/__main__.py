import sys

from moonc.presentation.cli import main


if __name__ == '__main__':
    sys.exit(main())

import sys

from angle_brackets.cli import main

if __name__ == "__main__":
    sys.exit(main())

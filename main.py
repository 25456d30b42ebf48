import sys

from habit_logger.cli.app import main

if __name__ == "__main__":
    sys.exit(main())

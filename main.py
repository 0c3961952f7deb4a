import sys

from github_activity.cli import main


if __name__ == "__main__":
    sys.exit(main())

"""Allow ``python -m longpath``."""

from longpath.cli import main

if __name__ == "__main__":
    main()

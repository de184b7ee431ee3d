"""Package entry point for ``python -m storylab``."""

from storylab.cli import main

if __name__ == "__main__":
    main()

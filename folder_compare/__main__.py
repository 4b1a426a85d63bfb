"""Allow running as ``python -m folder_compare``."""

from .cli import main

if __name__ == "__main__":
    main()

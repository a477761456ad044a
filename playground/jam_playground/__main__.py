"""Allow running as ``python -m jam_playground``."""

from jam_playground.cli import main

if __name__ == "__main__":
    main()

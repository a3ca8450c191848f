"""Entry point for ``python -m fast_tracker``."""

from fast_tracker.cli import main

if __name__ == "__main__":
    main()

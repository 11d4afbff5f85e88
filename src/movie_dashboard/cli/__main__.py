"""Allow running the CLI with ``python -m movie_dashboard.cli``."""

from .main import main

if __name__ == "__main__":
    main()

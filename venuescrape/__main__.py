"""
Package entry point.

Allows running the application via:

    python -m venuescrape

This simply forwards execution to venuescrape.cli.main().
"""

from venuescrape.cli import main

if __name__ == "__main__":
    main()

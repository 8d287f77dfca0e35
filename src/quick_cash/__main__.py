"""Module entrypoint for `python -m quick_cash`."""

from quick_cash.cli import app


if __name__ == "__main__":
    app()

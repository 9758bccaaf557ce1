"""Allow ``python -m treecalc``."""

from treecalc.cli import app

if __name__ == "__main__":
    app()

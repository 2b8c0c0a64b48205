"""Allow ``python -m ccheatmap``."""

from ccheatmap.cli import app

if __name__ == "__main__":
    app()

"""
Entry point.

Run: uv run python -m cartkit
"""

from cartkit.cli import main


if __name__ == "__main__":
    main()

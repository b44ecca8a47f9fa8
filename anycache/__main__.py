"""Main entry point when executing anycache as a package.

This allows running the CLI using python -m anycache.
"""

from anycache.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()

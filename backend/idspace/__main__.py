"""Entry point: python -m idspace"""

from idspace.cli import cli

if __name__ == "__main__":
    cli()

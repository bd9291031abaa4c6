"""Allow running as ``python -m ledcycle``."""

from ledcycle.cli.main import cli

if __name__ == "__main__":
    cli()

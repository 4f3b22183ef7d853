"""pixweave package entrypoint."""

from pixweave.cli.app import main as _cli_main


def main() -> None:
    """Run the pixweave CLI."""
    _cli_main()

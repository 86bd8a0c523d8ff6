"""CLI entry point for tikit."""

import sys

import click

from . import commands, utils


def main():
    verbose = "--verbose" in sys.argv or "-v" in sys.argv

    if "-h" in sys.argv:
        sys.argv.remove("-h")
        sys.argv.append("--help")

    if not any(name in sys.argv[1:] for name in commands.cli.commands) and (
        "--help" not in sys.argv
    ):
        sys.argv.append("browse")

    try:
        # pylint: disable=no-value-for-parameter
        commands.cli()
    except KeyboardInterrupt:
        click.secho("Operation cancelled by user", fg="yellow")
        sys.exit(1)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        if verbose:
            utils.log("Verbose mode enabled. Full error details:")
            raise e
        sys.exit(1)


if __name__ == "__main__":
    main()

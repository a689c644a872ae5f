"""
Command-line interface for PDF Combine.

Dropping PDF files onto the installed ``pdf-combine`` launcher passes them
as arguments, which is all this command needs.
"""

import sys

import click

from pdfcombine import __version__
from pdfcombine.app import CombineContext, ExitCode, run
from pdfcombine.dialogs import ConsoleDialogs, TkDialogs
from pdfcombine.utils import configure_logging, program_directory


@click.command(name="pdf-combine")
@click.version_option(version=__version__)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--console", "-c",
    is_flag=True,
    help="Prompt on the terminal instead of showing dialog windows",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log every processed file and page",
)
def cli(paths, console, verbose):
    """
    Merge PDF files into a single PDF in the program's directory.

    Inputs are merged in case-insensitive alphabetical order of their paths.

    Examples:

        pdf-combine chapter1.pdf chapter2.pdf

        pdf-combine --console scans/*.pdf
    """
    configure_logging(verbose)

    try:
        dialogs = ConsoleDialogs() if console else TkDialogs()
    except Exception as e:
        click.echo(f"Error:\n{e}", err=True)
        sys.exit(int(ExitCode.UNEXPECTED_ERROR))

    try:
        code = run(CombineContext(dialogs=dialogs, base_dir=program_directory(), raw_args=list(paths)))
    finally:
        dialogs.close()

    sys.exit(int(code))


if __name__ == "__main__":  # pragma: no cover
    cli()

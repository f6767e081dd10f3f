"""
Command-line interface for PDF Shrinker.
"""

import shlex
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn, TimeElapsedColumn

from pdf_shrinker import __version__
from pdf_shrinker.config import ShrinkerSettings
from pdf_shrinker.engine import GhostscriptEngine
from pdf_shrinker.options import resolve_request
from pdf_shrinker.profiles import DEFAULT_LEVEL, get_profile
from pdf_shrinker.utils import configure_logging, format_megabytes

console = Console()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    '--input', '-i', 'input_pdf',
    required=True,
    help='Input PDF file path',
    type=click.Path()
)
@click.option(
    '--output', '-o', 'output_pdf',
    default=None,
    help='Output PDF file path (defaults to <input>-compressed.pdf)',
    type=click.Path()
)
@click.option(
    '--level', '-l',
    default=str(DEFAULT_LEVEL),
    show_default=True,
    help='Compression level (1-5, where 1 is lowest compression, 5 is highest)',
    type=str
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Show detailed processing information'
)
def cli(input_pdf, output_pdf, level, verbose):
    """
    PDF Shrinker - compress PDF files using Ghostscript.

    Examples:

        pdf-shrinker -i report.pdf

        pdf-shrinker -i report.pdf -o small.pdf -l 5

        pdf-shrinker -i scans.PDF -l 1 -v
    """
    configure_logging(verbose)
    try:
        request = resolve_request(
            input_pdf,
            output_pdf,
            level=level,
            verbose=verbose,
            notify=lambda notice: console.print(f"[yellow]{escape(notice)}[/yellow]"),
        )

        console.print("[bold blue]Starting PDF compression...[/bold blue]")
        console.print(f"[dim]Input: {escape(str(request.input_path))}[/dim]")
        console.print(f"[dim]Output: {escape(str(request.output_path))}[/dim]")
        profile = get_profile(request.level)
        console.print(f"[dim]Compression level: {request.level} ({profile.name})[/dim]")

        input_size = request.input_path.stat().st_size
        console.print(f"[dim]Input file size: {format_megabytes(input_size)}[/dim]")

        engine = GhostscriptEngine(ShrinkerSettings.from_env())
        if request.verbose:
            command = engine.build_command(request)
            console.print(f"[dim]Ghostscript command:[/dim] {escape(shlex.join(command))}")

        def echo_output(stream_name, text):
            style = "yellow" if stream_name == "stderr" else "dim"
            console.print(f"[{style}]GS {stream_name}: {escape(text.rstrip())}[/{style}]")

        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console
        ) as progress:
            task = progress.add_task("Compressing", total=100)

            def update_progress(percent):
                progress.update(task, completed=percent)

            result = engine.compress(
                request,
                progress_callback=update_progress,
                output_callback=echo_output if request.verbose else None,
            )

        console.print("\n[bold green]✓ PDF compression completed successfully![/bold green]")
        console.print(f"[dim]Output file size: {format_megabytes(result.output_size_bytes)}[/dim]")
        console.print(
            f"[bold blue]Compression ratio: {result.ratio:.2f}x "
            f"({result.percent_saved:.1f}% smaller)[/bold blue]"
        )
        if request.verbose:
            console.print(f"[dim]Saved {format_megabytes(result.bytes_saved)}[/dim]")

    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    cli()

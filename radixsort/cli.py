"""
radixsort command-line driver.

Reads a token file (first token is the radix, then the entries) and prints
the entries in ascending numeric order.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import demo as demo_mod
from .digits import MAX_RADIX, MIN_RADIX
from .errors import RadixSortError
from .tokens import sort_stream

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="radixsort",
    help="LSD radix sort for digit strings in any radix from 2 to 36",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(
        f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True
    )
    raise typer.Exit(1)


@app.command(name="sort", help="Sort the entries of a token file (stdin by default)")
def sort_cmd(
    path: Optional[Path] = typer.Argument(
        None, help="Input file; first token is the radix. Omit or use '-' for stdin"
    ),
    inline: bool = typer.Option(
        False, "--inline", help="Print entries on one line, space separated"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every scatter/gather pass"
    ),
) -> None:
    _setup_logging(verbose)
    try:
        if path is None or str(path) == "-":
            result = sort_stream(sys.stdin)
        else:
            if not path.exists():
                _fail(f"no such file: {path}")
            if not path.is_file():
                _fail(f"not a file: {path}")
            with path.open(encoding="utf-8") as f:
                result = sort_stream(f)
    except RadixSortError as e:
        _fail(str(e))
    except UnicodeDecodeError as e:
        _fail(f"input is not valid text: {e}")
    except OSError as e:
        _fail(f"cannot read input: {e}")

    # entries go out verbatim, no markup/highlighting
    if inline:
        console.print(
            " ".join(result), markup=False, highlight=False, soft_wrap=True
        )
    else:
        for entry in result:
            console.print(entry, markup=False, highlight=False, soft_wrap=True)


@app.command(name="demo", help="Sort random entries and compare against sorted()")
def demo_cmd(
    count: int = typer.Option(
        demo_mod.N, "--count", "-n", min=0, help="Number of entries"
    ),
    radix: int = typer.Option(
        demo_mod.RADIX,
        "--radix",
        "-r",
        min=MIN_RADIX,
        max=MAX_RADIX,
        help="Radix of the entries",
    ),
    max_value: int = typer.Option(
        demo_mod.MAX_VAL, "--max-value", min=0, help="Largest generated value"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    _, reference, sorted_array = demo_mod.run(count, max_value, radix, seed)
    if sorted_array != reference:
        _fail("radix sort disagrees with sorted()")


def main() -> None:
    """Console script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\nOperation cancelled by user.")
        sys.exit(130)
    except Exception as e:
        err_console.print(f"Error: {escape(str(e))}", highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()


import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .converter import (
    DISPLAY_SCALE,
    MAX_BASE,
    MIN_BASE,
    convert_base,
    parse_base,
    parse_base_pair,
    round_fraction,
)


EXIT_COMMAND = "/exit"
BACK_COMMAND = "/back"

logger = logging.getLogger(__name__)


def format_result(result: str, scale: int | None) -> str:
    if scale is None:
        return result
    return round_fraction(result, scale)


def convert_loop(console: Console, src_base: int, dst_base: int, scale: int | None) -> bool:
    """Convert numbers until /back. Returns False once the user wants to quit."""
    while True:
        num_str = console.input(
            f"Enter number in base {src_base} to convert to base {dst_base} "
            f"(To go back type {BACK_COMMAND}) "
        ).strip()

        if num_str == BACK_COMMAND:
            return True
        if num_str == EXIT_COMMAND:
            return False
        if not num_str:
            continue

        try:
            result = format_result(convert_base(num_str, src_base, dst_base), scale)
        except ValueError as e:
            logger.debug("conversion of %r failed", num_str, exc_info=True)
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            continue

        console.print(f"Conversion result: [bold green]{escape(result)}[/bold green]", soft_wrap=True)


def interactive_mode(console: Console, scale: int | None = DISPLAY_SCALE) -> None:
    console.print(f"[bold cyan]=== Base Converter ({MIN_BASE}-{MAX_BASE}) ===[/bold cyan]")

    try:
        while True:
            bases_str = console.input(
                "Enter two numbers in format: {source base} {target base} "
                f"(To quit type {EXIT_COMMAND}) "
            ).strip()

            if bases_str == EXIT_COMMAND:
                break

            try:
                src_base, dst_base = parse_base_pair(bases_str)
            except ValueError as e:
                console.print(f"[red]Error: {escape(str(e))}[/red]")
                continue

            if not convert_loop(console, src_base, dst_base, scale):
                break
    except (EOFError, KeyboardInterrupt):
        console.print()

    console.print("Exiting.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixtool",
        description=f"Convert integer and fractional numbers between bases {MIN_BASE}-{MAX_BASE}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  radixtool                  interactive mode
  radixtool FF 16 10         255
  radixtool 0.1 10 3 -s 8    0.00220022
  radixtool 10.5 10 2 --exact
        """,
    )
    parser.add_argument("number", nargs="?", help="Number to convert")
    parser.add_argument("from_base", nargs="?", help="Source base")
    parser.add_argument("to_base", nargs="?", help="Target base")
    parser.add_argument(
        "-s", "--scale", type=int, default=DISPLAY_SCALE,
        help=f"Fractional digits to show (default: {DISPLAY_SCALE})",
    )
    parser.add_argument("--exact", action="store_true", help="Print the result without truncating or padding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def setup_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def cli(args: list[str]) -> None:
    parser = build_parser()
    opts = parser.parse_args(args)

    if opts.scale < 0:
        parser.error("--scale must be non-negative")

    console = Console()
    err_console = Console(stderr=True)
    setup_logging(opts.verbose, err_console)

    scale = None if opts.exact else opts.scale
    positional = [opts.number, opts.from_base, opts.to_base]

    if all(p is None for p in positional):
        interactive_mode(console, scale)
        return

    if any(p is None for p in positional):
        parser.error("expected <number> <from_base> <to_base>, or no arguments for interactive mode")

    try:
        from_base = parse_base(opts.from_base)
        to_base = parse_base(opts.to_base)
        result = format_result(convert_base(opts.number, from_base, to_base), scale)
    except ValueError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(result, markup=False, highlight=False, soft_wrap=True)


def main() -> None:
    cli(sys.argv[1:])


if __name__ == "__main__":
    main()

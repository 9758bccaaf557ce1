"""Interactive console shell for the tree calculator.

Usage:
    python -m treecalc start               # Start a session at 0
    python -m treecalc start --initial 5   # Start from another value
    python -m treecalc start -v            # Debug logging on stderr
    python -m treecalc commands            # Show the operation menu
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from treecalc.config import CalculatorConfig
from treecalc.core import Calculator
from treecalc.exceptions import CalculatorError, ParseError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T", str, float, int)

app = typer.Typer(
    name="treecalc",
    help="Calculator with a navigable history tree",
    no_args_is_help=True,
)
console = Console()

EXIT_OPTION = 14
PROMPT = "Enter operation (1-16, 'help', or 'exit'): "

# Menu number -> (display name, calculator method)
VALUE_OPERATIONS = {
    1: ("Addition", "add"),
    2: ("Subtraction", "subtract"),
    3: ("Multiplication", "multiply"),
    4: ("Division", "divide"),
    5: ("Exponentiation", "power"),
}
PLAIN_OPERATIONS = {
    6: ("Square root", "square_root"),
    7: ("Square", "square"),
    8: ("Natural log", "natural_log"),
    9: ("Redo", "go_forwards"),
    10: ("Undo", "go_backwards"),
}

MENU = [
    ("1", "Addition"),
    ("2", "Subtraction"),
    ("3", "Multiplication"),
    ("4", "Division"),
    ("5", "Exponentiation"),
    ("6", "Square root"),
    ("7", "Square"),
    ("8", "Natural logarithm"),
    ("9", "Redo (go forwards)"),
    ("10", "Undo (go backwards)"),
    ("11", "Reset"),
    ("12", "Show history"),
    ("13", "Recover from cache"),
    ("14", "Exit calculator"),
    ("15", "Clear cache"),
    ("16", "Enter a value"),
    ("help", "Show operations help"),
]


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def read_line(console: Console, prompt: str = "", stream: TextIO | None = None) -> str:
    """
    Read one line of input, stripped of surrounding whitespace.

    Raises:
        EOFError: When the input is exhausted
    """
    line = console.input(prompt, markup=False, stream=stream)
    if stream is not None and not line:
        raise EOFError
    return line.strip()


def read_value(
    console: Console, kind: type[T], prompt: str = "", stream: TextIO | None = None
) -> T:
    """
    Read one line and parse it as ``str``, ``float`` or an unsigned ``int``.

    Raises:
        ParseError: If the line is empty or cannot be parsed
        EOFError: When the input is exhausted
    """
    text = read_line(console, prompt, stream)
    if not text:
        raise ParseError("Empty input")

    try:
        value = kind(text)
    except ValueError as e:
        raise ParseError(f"Parse error: {e}") from e

    if kind is int and value < 0:
        raise ParseError("Parse error: expected an unsigned integer", text)
    return value


def render_menu() -> Table:
    table = Table(title="Calculator Operations", show_header=True, header_style="bold")
    table.add_column("Command", style="green", justify="right")
    table.add_column("Description", min_width=25)
    for command, description in MENU:
        table.add_row(command, description)
    return table


def _report(console: Console, name: str, action: Callable[[], object]) -> bool:
    """Run an action, printing the failure instead of raising it."""
    try:
        action()
    except CalculatorError as e:
        console.print(f"{name} failed: {e}. State preserved.", markup=False)
        return False
    return True


def _dispatch(calc: Calculator, option: int, console: Console, stream: TextIO | None) -> None:
    if option in VALUE_OPERATIONS or option == 16:
        name, method = VALUE_OPERATIONS.get(option, ("Input", "input"))
        try:
            value = read_value(console, float, "Enter value: ", stream)
        except ParseError as e:
            console.print(f"Invalid number ({e}). Try again.", markup=False)
            return
        _report(console, name, lambda: getattr(calc, method)(value))
    elif option in PLAIN_OPERATIONS:
        name, method = PLAIN_OPERATIONS[option]
        _report(console, name, getattr(calc, method))
    elif option == 11:
        calc.reset()
        console.print(f"Calculator reset to {calc.output()}. Full history saved to snapshots.")
    elif option == 12:
        console.print(calc.show_history(), markup=False, highlight=False)
    elif option == 13:
        if _report(console, "Cache recovery", calc.recover_cache):
            console.print(f"Recovered to cached state with value: {calc.output()}")
    elif option == 15:
        calc.clear_cache()
        console.print("All cached snapshots deleted.")
    else:
        console.print(f"Invalid option: {option}. Use 1-16.")


def run_session(
    calc: Calculator, console: Console, stream: TextIO | None = None
) -> Calculator:
    """
    Run the numbered-menu loop until the user exits or input runs out.

    Operation errors are printed and the session continues; the loop only
    returns control, it never exits the process.
    """
    while True:
        console.print(f"\nCurrent value: {calc.output()}")
        try:
            command = read_line(console, PROMPT, stream)
        except EOFError:
            break

        lowered = command.lower()
        if lowered == "help":
            console.print(render_menu())
            continue
        if lowered in ("exit", "quit"):
            break

        try:
            option = int(command)
        except ValueError:
            console.print(
                f"Invalid command: '{command}'. Use 1-16, 'help', or 'exit'", markup=False
            )
            continue

        if option == EXIT_OPTION:
            break
        try:
            _dispatch(calc, option, console, stream)
        except EOFError:
            break

    console.print("Calculator session ended.")
    return calc


@app.command("start")
def cmd_start(
    initial: float | None = typer.Option(None, "--initial", "-i", help="Starting value"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Start an interactive calculator session."""
    try:
        config = CalculatorConfig.from_env()
    except CalculatorError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    setup_logging(config.log_level, verbose)
    try:
        calc = Calculator(initial, config=config)
    except CalculatorError as e:
        console.print(f"[red]Invalid starting value:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print("[bold]=== Tree Calculator ===[/bold]")
    console.print(f"Calculator started. Current value: {calc.output()}")
    run_session(calc, console)


@app.command("commands")
def cmd_commands() -> None:
    """Show the operation menu."""
    console.print(render_menu())


def main() -> None:
    app()

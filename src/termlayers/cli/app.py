"""Typer CLI application with interactive demos of each widget."""

from __future__ import annotations

from dataclasses import replace
from typing import Annotated, ContextManager, Optional

import typer
from rich.console import Console

from termlayers.config import TerminalConfig
from termlayers.core.grid import Layer2D
from termlayers.core.layer import Layer
from termlayers.logging_config import setup_logging
from termlayers.term.keys import Alpha, Key
from termlayers.term.terminal import Terminal


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termlayers",
        help="Layered terminal drawing and line-editing prompts.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    state: dict[str, TerminalConfig] = {"config": TerminalConfig()}

    @app.callback()
    def main(
        log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (DEBUG, INFO, ...)")] = None,
        log_file: Annotated[Optional[str], typer.Option("--log-file", help="Write log records to this file")] = None,
    ) -> None:
        """Configure logging and terminal settings shared by all commands."""
        try:
            config = TerminalConfig.from_env()
            if log_level:
                config = replace(config, log_level=log_level.upper())
            if log_file:
                config = replace(config, log_file=log_file)
            setup_logging(config.log_level, config.log_file)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)
        state["config"] = config

    def session() -> ContextManager[Terminal]:
        return Terminal.open(config=state["config"])

    @app.command()
    def ask(
        prefix: Annotated[str, typer.Option("--prefix", "-p", help="Prompt shown before the input")] = "> ",
    ) -> None:
        """Read a line of text."""
        with session() as t:
            answer = t.ask(prefix)
        console.print(f"[bold]You typed:[/] {answer!r}")

    @app.command()
    def mask(
        prefix: Annotated[str, typer.Option("--prefix", "-p", help="Prompt shown before the input")] = "Password: ",
        char: Annotated[str, typer.Option("--char", "-c", help="Mask character")] = "*",
    ) -> None:
        """Read a line of text without showing it."""
        try:
            with session() as t:
                secret = t.mask(prefix, char)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)
        console.print(f"[bold]Read[/] {len(secret)} hidden character(s)")

    @app.command()
    def yesno(
        question: Annotated[str, typer.Argument(help="Question to ask")] = "Continue?",
        labels: Annotated[str, typer.Option("--labels", "-l", help="Yes and no labels, e.g. 'y/n'")] = "y/n",
        default: Annotated[bool, typer.Option("--default-yes/--default-no", help="Initially selected answer")] = True,
    ) -> None:
        """Ask a yes/no question (left/right to toggle, Enter to confirm)."""
        try:
            with session() as t:
                t.out(f"{question} ")
                answer = t.yesno(labels, default)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)
        console.print(f"[bold]Answer:[/] {'[green]yes[/]' if answer else '[red]no[/]'}")

    @app.command()
    def choices(
        items: Annotated[list[str], typer.Argument(help="Items to choose from")],
        prefix: Annotated[str, typer.Option("--prefix", "-p", help="Marker for the selected item")] = "-> ",
        title: Annotated[str, typer.Option("--title", "-t", help="Heading above the list")] = "Choose...",
    ) -> None:
        """Pick one item (up/down to move, Enter to confirm)."""
        with session() as t:
            t.raw_out(title)
            picked = t.choices(prefix, items)
        console.print(f"[bold]Picked:[/] {picked}")

    @app.command()
    def grid(
        cols: Annotated[int, typer.Option("--cols", min=1, help="Grid columns")] = 5,
        rows: Annotated[int, typer.Option("--rows", min=1, help="Grid rows")] = 5,
        fill: Annotated[str, typer.Option("--fill", help="Cell content")] = "X",
        x: Annotated[int, typer.Option("--x", help="Grid column origin")] = 2,
        y: Annotated[int, typer.Option("--y", help="Grid row origin")] = 1,
    ) -> None:
        """Draw a grid layer and move a marker with the arrow keys."""
        with session() as t:
            board = t.add_layer2d(Layer2D(x, y, cols, rows, Layer().set_content(fill)))
            status = t.add_layer(Layer(0, y + rows + 1))
            status.set_content("arrows move, Enter quits")
            col = row = 0
            marker = "@" * max(1, len(fill))
            board.get(col, row).set_content(marker)
            t.refresh()
            while (key := t.get_char_hidden()) not in (None, Key.ENTER):
                board.get(col, row).set_content(fill)
                if key is Key.LEFT:
                    col = max(col - 1, 0)
                elif key is Key.RIGHT:
                    col = min(col + 1, cols - 1)
                elif key is Key.UP:
                    row = max(row - 1, 0)
                elif key is Key.DOWN:
                    row = min(row + 1, rows - 1)
                board.get(col, row).set_content(marker)
                status.set_content(f"({col}, {row})")
                t.refresh()
        console.print(f"[bold]Last cell:[/] ({col}, {row})")

    @app.command()
    def keys() -> None:
        """Show the symbol for each key pressed until Enter."""
        seen: list[str] = []
        with session() as t:
            t.outln("Press keys, Enter to stop")
            label = t.add_layer(Layer(0, 1))
            while (key := t.get_char_hidden()) not in (None, Key.ENTER):
                name = f"Alpha({key.char!r})" if isinstance(key, Alpha) else key.name
                seen.append(name)
                label.set_content(name)
                t.refresh()
        console.print(f"[bold]Keys:[/] {', '.join(seen) or '(none)'}")

    return app

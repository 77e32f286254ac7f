"""Console output for the CLI.

All CLI output goes through get_console() so it is styled consistently.
"""

from rich.console import Console as RichConsole


class Console:
    """Thin wrapper around rich for success/error/info lines."""

    def __init__(self, console: RichConsole | None = None) -> None:
        self._console = console or RichConsole()

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[dim]•[/dim] {message}")

    def error(self, message: str, hint: str | None = None) -> None:
        self._console.print(f"[red]✗[/red] {message}")
        if hint:
            self._console.print(f"  [dim]{hint}[/dim]")


_console: Console | None = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console

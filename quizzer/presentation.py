"""
Terminal presentation for the quiz shell.

The game and command code only talk to the Presenter protocol. The console
implementation renders with rich and reads each answer on a daemon thread
that resolves a future on the event loop, so a pending question never blocks
the loop and never keeps the process alive after Ctrl-C.
"""

from __future__ import annotations

import asyncio
import sys
import threading
from typing import Protocol

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

try:
    import readline
except ImportError:  # Windows consoles ship without GNU readline
    readline = None


class Presenter(Protocol):
    """What the session controller needs from the user interface."""

    async def prompt_for_text(self, label: str, default: str = "") -> str:
        """Ask for one line of text. Resolves when the user answers."""
        ...

    def display_line(self, text: str) -> None:
        ...

    def display_error(self, text: str) -> None:
        ...

    def display_banner(self, text: str, style: str = "cyan") -> None:
        ...


class PromptInFlightError(RuntimeError):
    """Raised when a second prompt is issued before the first was answered."""


def _settle(future: asyncio.Future, result: str | None, error: BaseException | None) -> None:
    # The awaiting task may have been cancelled (Ctrl-C) while we were reading.
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)


class ConsolePresenter:
    """Presenter backed by a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)
        self._prompting = False

    @property
    def prompting(self) -> bool:
        return self._prompting

    async def prompt_for_text(self, label: str, default: str = "") -> str:
        if self._prompting:
            raise PromptInFlightError("A prompt is already waiting for an answer")

        self._prompting = True
        try:
            loop = asyncio.get_running_loop()
            future = loop.create_future()
            reader = threading.Thread(
                target=self._read_into,
                args=(loop, future, label, default),
                name="quizzer-prompt",
                daemon=True,
            )
            reader.start()
            return await future
        finally:
            self._prompting = False

    def _read_into(
        self,
        loop: asyncio.AbstractEventLoop,
        future: asyncio.Future,
        label: str,
        default: str,
    ) -> None:
        """Reader thread body: hand the line, or the read error, to the loop."""
        try:
            result, error = self._read_line(label, default), None
        except (Exception, KeyboardInterrupt) as e:
            result, error = None, e
        if not loop.is_closed():
            loop.call_soon_threadsafe(_settle, future, result, error)

    def _read_line(self, label: str, default: str) -> str:
        prefill = default and readline is not None and sys.stdin.isatty() and sys.stdout.isatty()
        if prefill:
            readline.set_startup_hook(lambda: readline.insert_text(default))
        try:
            return self.console.input(f"[red]{escape(label)}[/red] ")
        finally:
            if prefill:
                readline.set_startup_hook()

    def display_line(self, text: str) -> None:
        self.console.print(text)

    def display_error(self, text: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] [red]{escape(text)}[/red]")

    def display_banner(self, text: str, style: str = "cyan") -> None:
        panel = Panel(
            f"[bold {style}]{escape(text)}[/bold {style}]",
            border_style=style,
            box=box.HEAVY,
            expand=False,
            padding=(0, 2),
        )
        self.console.print(panel)

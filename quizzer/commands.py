"""
Command dispatcher for the interactive quiz shell.

Each command is an async `do_<name>` method, in the spirit of cmd.Cmd.
Recoverable errors (bad or missing id, unknown command) are caught here,
shown to the user and returned as an ErrorKind; they never end the shell.

Commands:
    h|help          List commands
    list            List quizzes
    show <id>       Show question and answer
    add             Add a quiz interactively
    delete <id>     Delete a quiz
    edit <id>       Edit a quiz interactively
    test <id>       Try a single quiz
    p|play          Play all quizzes in random order
    credits         Credits
    q|quit          Leave the program
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Awaitable, Callable

from loguru import logger
from rich.markup import escape

from quizzer.errors import ErrorKind, MissingArgumentError, QuizzerError, UnknownCommandError
from quizzer.game import PlaySession, run_test
from quizzer.presentation import Presenter
from quizzer.store import QuizStore

HELP_LINES = [
    "   h|help - Show this help.",
    "   list - List the existing quizzes.",
    "   show <id> - Show the question and answer of the given quiz.",
    "   add - Add a new quiz interactively.",
    "   delete <id> - Delete the given quiz.",
    "   edit <id> - Edit the given quiz.",
    "   test <id> - Try the given quiz.",
    "   p|play - Play: answer every quiz in random order.",
    "   credits - Credits.",
    "   q|quit - Leave the program.",
]

ALIASES = {
    "h": "help",
    "p": "play",
    "q": "quit",
}

NEEDS_ID = {"show", "delete", "edit", "test"}


@dataclass
class CommandOutcome:
    """What happened when a command line was executed."""
    command: str | None
    keep_running: bool = True
    error: ErrorKind | None = None


def _arrow() -> str:
    return "[magenta]=>[/magenta]"


def _tag(id: object) -> str:
    return f"[[magenta]{escape(str(id))}[/magenta]]"


class CommandDispatcher:
    """Parses command lines and runs them against a quiz store."""

    def __init__(
        self,
        store: QuizStore,
        presenter: Presenter,
        rng: random.Random | None = None,
        author: str = "ALVARO",
    ):
        self.store = store
        self.presenter = presenter
        self.rng = rng or random.Random()
        self.author = author

    def _handler(self, name: str) -> Callable[[str | None], Awaitable[bool]]:
        return getattr(self, f"do_{name}")

    @staticmethod
    def parse(line: str) -> tuple[str | None, str | None]:
        """Split a line into (command, first argument). Empty line gives (None, None)."""
        words = line.split()
        if not words:
            return None, None
        command = words[0].lower()
        command = ALIASES.get(command, command)
        return command, words[1] if len(words) > 1 else None

    async def execute(self, line: str) -> CommandOutcome:
        command, arg = self.parse(line)
        if command is None:
            return CommandOutcome(command=None)

        try:
            if not hasattr(self, f"do_{command}"):
                raise UnknownCommandError(command)
            if command in NEEDS_ID and arg is None:
                raise MissingArgumentError(command)
            keep_running = await self._handler(command)(arg)
        except QuizzerError as e:
            logger.warning(f"{command}: {e}")
            self.presenter.display_error(str(e))
            return CommandOutcome(command=command, error=e.kind)

        return CommandOutcome(command=command, keep_running=keep_running)

    # ========================================
    # Commands
    # ========================================

    async def do_help(self, arg: str | None) -> bool:
        self.presenter.display_line("Commands:")
        for line in HELP_LINES:
            self.presenter.display_line(escape(line))
        return True

    async def do_list(self, arg: str | None) -> bool:
        if not self.store.size:
            self.presenter.display_line("[dim]There are no quizzes.[/dim]")
            return True

        for id, quiz in self.store.get_all():
            self.presenter.display_line(f"{_tag(id)}: {escape(quiz.question)}")
        return True

    async def do_show(self, arg: str | None) -> bool:
        quiz = self.store.get_by_index(arg)
        self.presenter.display_line(
            f"{_tag(arg)}: {escape(quiz.question)} {_arrow()} {escape(quiz.answer)}"
        )
        return True

    async def do_add(self, arg: str | None) -> bool:
        question = await self.presenter.prompt_for_text("Enter a question:")
        answer = await self.presenter.prompt_for_text("Enter the answer:")

        self.store.add(question, answer)
        self.presenter.display_line(
            f"[magenta]Added[/magenta]: {escape(question)} {_arrow()} {escape(answer)}"
        )
        return True

    async def do_delete(self, arg: str | None) -> bool:
        self.store.delete_by_index(arg)
        self.presenter.display_line(f"[magenta]Deleted[/magenta] quiz {_tag(arg)}")
        return True

    async def do_edit(self, arg: str | None) -> bool:
        quiz = self.store.get_by_index(arg)

        question = await self.presenter.prompt_for_text("Enter a question:", default=quiz.question)
        answer = await self.presenter.prompt_for_text("Enter the answer:", default=quiz.answer)

        self.store.update(arg, question, answer)
        self.presenter.display_line(
            f"Quiz {_tag(arg)} changed to: {escape(question)} {_arrow()} {escape(answer)}"
        )
        return True

    async def do_test(self, arg: str | None) -> bool:
        await run_test(self.store, self.presenter, arg)
        return True

    async def do_play(self, arg: str | None) -> bool:
        await PlaySession(self.store, self.presenter, rng=self.rng).run()
        return True

    async def do_credits(self, arg: str | None) -> bool:
        self.presenter.display_line("Authors:")
        self.presenter.display_line(f"[green]{escape(self.author)}[/green]")
        return True

    async def do_quit(self, arg: str | None) -> bool:
        return False


async def run_shell(
    dispatcher: CommandDispatcher,
    prompt_text: str = "quiz > ",
) -> None:
    """
    Idle loop: prompt for a command, run it, repeat until quit.

    End of input and Ctrl-C count as quit, also in the middle of a command.
    """
    presenter = dispatcher.presenter
    presenter.display_banner("CORE Quiz")

    while True:
        try:
            line = await presenter.prompt_for_text(prompt_text.rstrip())
            outcome = await dispatcher.execute(line)
        except (KeyboardInterrupt, EOFError):
            presenter.display_line("")
            break

        if not outcome.keep_running:
            break

    presenter.display_line("[dim]Bye![/dim]")
    logger.info("Quiz shell closed")

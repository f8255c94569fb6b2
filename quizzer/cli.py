"""
Quizzer CLI - interactive quiz trainer.

Usage:
    quizzer                  # Start the shell with the built-in quizzes
    quizzer --no-defaults    # Start with an empty store
    quizzer --seed 42        # Reproducible play order
    python -m quizzer        # Same as `quizzer`
"""

from __future__ import annotations

import asyncio
import random
import sys
from typing import Annotated, Optional

import typer
from loguru import logger

from quizzer.commands import CommandDispatcher, run_shell
from quizzer.config import get_settings
from quizzer.presentation import ConsolePresenter
from quizzer.store import QuizStore

app = typer.Typer(
    name="quizzer",
    help="Interactive command-line quiz trainer",
    add_completion=False,
    rich_markup_mode="rich",
)

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str, log_file: str | None = None) -> None:
    """Replace loguru's default sink with the quizzer format."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="1 MB", retention=3)


def build_dispatcher(
    load_defaults: bool,
    seed: int | None,
    author: str,
    presenter: ConsolePresenter | None = None,
) -> CommandDispatcher:
    store = QuizStore.with_defaults() if load_defaults else QuizStore()
    return CommandDispatcher(
        store,
        presenter or ConsolePresenter(),
        rng=random.Random(seed),
        author=author,
    )


@app.command()
def main(
    no_defaults: Annotated[
        bool, typer.Option("--no-defaults", help="Start with an empty quiz store")
    ] = False,
    seed: Annotated[
        Optional[int], typer.Option("--seed", "-s", help="Seed for the play order")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR")
    ] = None,
) -> None:
    """
    Start the interactive quiz shell.

    Type [bold]help[/bold] at the prompt to list the commands.
    """
    settings = get_settings()
    configure_logging((log_level or settings.log_level).upper(), settings.log_file)

    dispatcher = build_dispatcher(
        load_defaults=settings.load_default_quizzes and not no_defaults,
        seed=seed if seed is not None else settings.random_seed,
        author=settings.credits_author,
    )
    logger.info(f"Quiz shell started with {dispatcher.store.size} quizzes")

    try:
        asyncio.run(run_shell(dispatcher, prompt_text=settings.prompt_text))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        dispatcher.presenter.display_line("")
        dispatcher.presenter.display_line("[dim]Bye![/dim]")


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()

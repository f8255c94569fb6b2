"""
Unit tests for the rich console presenter.
"""

import asyncio
import io
import threading

import pytest
from rich.console import Console

from quizzer.presentation import ConsolePresenter, PromptInFlightError


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False, width=80)


def test_display_error_escapes_markup(console):
    presenter = ConsolePresenter(console)

    presenter.display_error("Invalid value for parameter id: '[red]'")

    assert "'[red]'" in console.file.getvalue()


def test_banner_shows_text(console):
    presenter = ConsolePresenter(console)

    presenter.display_banner("Correct", style="green")

    assert "Correct" in console.file.getvalue()


@pytest.mark.asyncio
async def test_second_prompt_while_waiting_is_rejected(console, monkeypatch):
    presenter = ConsolePresenter(console)
    release = asyncio.Event()
    loop = asyncio.get_running_loop()

    def slow_read(label, default):
        asyncio.run_coroutine_threadsafe(release.wait(), loop).result()
        return "answer"

    monkeypatch.setattr(presenter, "_read_line", slow_read)

    first = asyncio.create_task(presenter.prompt_for_text("First?"))
    await asyncio.sleep(0.05)
    assert presenter.prompting is True

    with pytest.raises(PromptInFlightError):
        await presenter.prompt_for_text("Second?")

    release.set()
    assert await first == "answer"
    assert presenter.prompting is False


@pytest.mark.asyncio
async def test_prompt_reads_from_console_input(monkeypatch):
    console = Console(file=io.StringIO(), force_terminal=False)
    monkeypatch.setattr("builtins.input", lambda *args: "  Paris ")
    presenter = ConsolePresenter(console)

    answer = await presenter.prompt_for_text("Capital of France?")

    assert answer == "  Paris "
    assert "Capital of France?" in console.file.getvalue()


@pytest.mark.asyncio
async def test_end_of_input_reaches_the_awaiting_task(console, monkeypatch):
    presenter = ConsolePresenter(console)

    def closed_stdin(label, default):
        raise EOFError

    monkeypatch.setattr(presenter, "_read_line", closed_stdin)

    with pytest.raises(EOFError):
        await presenter.prompt_for_text("Anything?")

    assert presenter.prompting is False


@pytest.mark.asyncio
async def test_reader_thread_does_not_hold_the_process(console, monkeypatch):
    presenter = ConsolePresenter(console)
    readers = []

    def record_thread(label, default):
        readers.append(threading.current_thread())
        return "ok"

    monkeypatch.setattr(presenter, "_read_line", record_thread)

    assert await presenter.prompt_for_text("Who reads?") == "ok"
    assert readers[0] is not threading.main_thread()
    assert readers[0].daemon is True


@pytest.mark.asyncio
async def test_cancelled_prompt_ignores_late_answer(console, monkeypatch):
    presenter = ConsolePresenter(console)
    release = threading.Event()
    answered = threading.Event()

    def blocked_read(label, default):
        release.wait(5)
        answered.set()
        return "too late"

    monkeypatch.setattr(presenter, "_read_line", blocked_read)

    task = asyncio.create_task(presenter.prompt_for_text("Stuck?"))
    await asyncio.sleep(0.05)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert presenter.prompting is False

    release.set()
    assert answered.wait(5)
    await asyncio.sleep(0.05)

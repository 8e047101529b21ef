from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TaskProgressColumn, TextColumn

from article_summarizer.logging_utils import console as shared_console


class ProgressReporter(Protocol):
    def start(self, total: int) -> None:
        ...

    def update(self, current: int) -> None:
        ...

    def stop(self) -> None:
        ...


class NullProgressReporter:
    """Progress reporter that shows nothing (library use, non-TTY runs)."""

    def start(self, total: int) -> None:
        pass

    def update(self, current: int) -> None:
        pass

    def stop(self) -> None:
        pass


class RichProgressReporter:
    """
    Terminal progress bar: 'Summarizing Articles |####| 40% | 2/5'.
    """

    def __init__(self, description: str = "Summarizing Articles", console: Optional[Console] = None) -> None:
        self._description = description
        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            MofNCompleteColumn(),
            console=console or shared_console,
        )
        self._task: Optional[TaskID] = None

    def start(self, total: int) -> None:
        # one bar per reporter: a restart replaces the previous run's task
        if self._task is not None:
            self._progress.remove_task(self._task)
        self._task = self._progress.add_task(self._description, total=total, completed=0)
        self._progress.start()

    def update(self, current: int) -> None:
        if self._task is not None:
            self._progress.update(self._task, completed=current)

    def stop(self) -> None:
        self._progress.stop()

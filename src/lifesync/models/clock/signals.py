"""Completion signals: how a finished timer gets the user's attention."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console


class CompletionSignal(ABC):
    """Capability invoked by the timer when it expires."""

    @abstractmethod
    def notify(self, title: str, body: str) -> None:
        """Show a visual notification."""

    @abstractmethod
    def play_tone(self) -> None:
        """Play an audible cue."""


class NullSignal(CompletionSignal):
    """Signal that does nothing."""

    def notify(self, title: str, body: str) -> None:
        pass

    def play_tone(self) -> None:
        pass


class ConsoleSignal(CompletionSignal):
    """Signal rendered on a Rich console: a banner plus the terminal bell."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def notify(self, title: str, body: str) -> None:
        self.console.print(f"\n[bold green]🎉 {title}[/bold green] {body}\n")

    def play_tone(self) -> None:
        self.console.bell()

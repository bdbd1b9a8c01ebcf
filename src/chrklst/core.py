"""Checklist presentation state (pure, no I/O)."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .models import DONE_TEXT


class StepStack:
    """Remaining checklist steps, consumed front to back.

    Items are stored reversed so the current step is the tail of the list
    and both peeking and advancing are O(1).
    """

    def __init__(self, items: Iterable[object] = ()):
        self._items: List[str] = [str(i) for i in items]
        self._items.reverse()

    def current(self) -> Optional[str]:
        """Return the step to show, or None once exhausted."""
        return self._items[-1] if self._items else None

    def advance(self) -> None:
        """Drop the current step. No-op when already exhausted."""
        if self._items:
            self._items.pop()

    @property
    def is_complete(self) -> bool:
        return not self._items

    def remaining(self) -> List[str]:
        """Steps still to come, in presentation order."""
        return self._items[::-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"StepStack({self.remaining()!r})"


@dataclass(frozen=True)
class Message:
    """Text for the panel; done marks the completion message."""

    text: str
    done: bool = False


@dataclass
class AppState:
    """Step stack plus the quit flag; owned by the presentation loop."""

    steps: StepStack = field(default_factory=StepStack)
    exit: bool = False

    @classmethod
    def with_steps(cls, items: Iterable[object]) -> "AppState":
        return cls(steps=StepStack(items))

    def next_step(self) -> None:
        self.steps.advance()

    def quit(self) -> None:
        self.exit = True

    def message(self) -> Message:
        step = self.steps.current()
        if step is None:
            return Message(text=DONE_TEXT, done=True)
        return Message(text=step)

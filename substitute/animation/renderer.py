"""Interface to the rendering collaborator.

The animation layer never touches a display directly. It addresses word
elements through opaque handles looked up by class label, mutates their
text, opacity, width and labels, and waits for the per-element
"transition complete" notification.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

WordHandle = Any
TransitionCallback = Callable[[], None]


def word_class(namespace: str) -> str:
    """Class carried by every word element."""
    return f"{namespace}-word"


def to_prefix(namespace: str) -> str:
    return f"{namespace}-to-idx-"


def from_prefix(namespace: str) -> str:
    return f"{namespace}-from-idx-"


def to_label(namespace: str, index: int) -> str:
    """Destination index label of a word."""
    return f"{to_prefix(namespace)}{index}"


def from_label(namespace: str, index: int) -> str:
    """Source index label of a word."""
    return f"{from_prefix(namespace)}{index}"


def animating_class(namespace: str) -> str:
    """Class that enables transitions on an element."""
    return f"{namespace}-animating"


def loaded_class(namespace: str) -> str:
    """Container class added once the first sentence has settled."""
    return f"{namespace}-loaded"


class Renderer(ABC):
    """Element operations the animation layer relies on."""

    @abstractmethod
    def mount(self, container_id: str, namespace: str, *, clear_original_content: bool) -> bool:
        """Prepare the container; return False if it does not exist."""

    @abstractmethod
    def add_container_class(self, label: str) -> None:
        """Add a class to the container."""

    @abstractmethod
    def words(self) -> list[WordHandle]:
        """Return the attached word elements in display order."""

    @abstractmethod
    def find(self, label: str) -> WordHandle | None:
        """Return the first attached word carrying ``label``."""

    @abstractmethod
    def classes(self, handle: WordHandle) -> frozenset[str]:
        """Return the classes of a word element."""

    @abstractmethod
    def add_class(self, handle: WordHandle, label: str) -> None:
        """Add a class to a word element."""

    @abstractmethod
    def remove_class(self, handle: WordHandle, label: str) -> None:
        """Remove a class from a word element, if present."""

    def replace_class(self, handle: WordHandle, old: str, new: str) -> None:
        """Swap one class for another on a word element."""
        self.remove_class(handle, old)
        self.add_class(handle, new)

    @abstractmethod
    def create_word(self, label: str, *, after: WordHandle | None) -> WordHandle:
        """Create an empty, transparent, zero-width word element.

        The element is placed right after ``after``, or first when
        ``after`` is None, and carries the word class and ``label``.
        """

    @abstractmethod
    def detach(self, handle: WordHandle) -> None:
        """Remove a word element from the container."""

    @abstractmethod
    def set_text(self, handle: WordHandle, text: str) -> None:
        """Replace the text of a word element."""

    @abstractmethod
    def set_opacity(self, handle: WordHandle, opacity: float) -> None:
        """Set the opacity of a word element."""

    @abstractmethod
    def set_width(self, handle: WordHandle, width: float | None) -> None:
        """Set the width of a word element; None restores automatic width."""

    @abstractmethod
    def measure_width(self, handle: WordHandle) -> float:
        """Return the current rendered width of a word element."""

    @abstractmethod
    def measure_text(self, text: str) -> float:
        """Return the width ``text`` would take when rendered as a word."""

    @abstractmethod
    def subscribe(self, handle: WordHandle, callback: TransitionCallback) -> None:
        """Call ``callback`` whenever a transition on ``handle`` completes."""

    @abstractmethod
    def unsubscribe(self, handle: WordHandle, callback: TransitionCallback) -> None:
        """Stop calling ``callback`` for ``handle``."""

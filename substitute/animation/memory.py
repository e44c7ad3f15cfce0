"""In-process rendering collaborator.

Keeps word elements as plain objects. Transition-complete notifications
are delivered on demand with :meth:`MemoryRenderer.complete`, or, with
``auto_complete`` set, by the running event loop after the configured
delay whenever opacity or width changes on an animating element.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from substitute.animation.renderer import (
    Renderer,
    TransitionCallback,
    animating_class,
    loaded_class,
    word_class,
)
from substitute.models import NBSP

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class MemoryWord:
    """A word element held by :class:`MemoryRenderer`."""

    classes: set[str]
    text: str = ""
    opacity: float = 0.0
    width: float | None = 0.0
    attached: bool = True
    listeners: list[TransitionCallback] = field(default_factory=list)


class MemoryRenderer(Renderer):
    """Renderer backed by a Python list of :class:`MemoryWord`.

    Parameters
    ----------
    containers : Iterable[str]
        Container identifiers that exist. Mounting any other fails.
    original_content : str
        Text already in the container before mounting.
    auto_complete : float | None
        Delay in seconds after which transitions complete by themselves.
        None means notifications are only sent by :meth:`complete`.
    char_width : float
        Width of one character, used to measure text.
    """

    def __init__(
        self,
        containers: Iterable[str] = ("sub",),
        *,
        original_content: str = "",
        auto_complete: float | None = 0.0,
        char_width: float = 10.0,
    ) -> None:
        self.containers = set(containers)
        self.original_content = original_content
        self.auto_complete = auto_complete
        self.char_width = char_width
        self.namespace = "sub"
        self.container_classes: set[str] = set()
        self.mounted = False
        self._words: list[MemoryWord] = []

    # Container

    def mount(self, container_id: str, namespace: str, *, clear_original_content: bool) -> bool:
        if container_id not in self.containers:
            return False
        self.namespace = namespace
        if clear_original_content:
            self.original_content = ""
        self.container_classes = {namespace}
        self.mounted = True
        return True

    def add_container_class(self, label: str) -> None:
        self.container_classes.add(label)

    @property
    def original_content_visible(self) -> bool:
        """True while leftover container content is still shown."""
        return bool(self.original_content) and loaded_class(self.namespace) not in self.container_classes

    # Registry

    def words(self) -> list[MemoryWord]:
        return [word for word in self._words if word.attached]

    def find(self, label: str) -> MemoryWord | None:
        for word in self.words():
            if label in word.classes:
                return word
        return None

    def classes(self, handle: MemoryWord) -> frozenset[str]:
        return frozenset(handle.classes)

    def add_class(self, handle: MemoryWord, label: str) -> None:
        handle.classes.add(label)

    def remove_class(self, handle: MemoryWord, label: str) -> None:
        handle.classes.discard(label)

    def create_word(self, label: str, *, after: MemoryWord | None) -> MemoryWord:
        word = MemoryWord(classes={word_class(self.namespace), label})
        position = 0 if after is None else self._words.index(after) + 1
        self._words.insert(position, word)
        return word

    def detach(self, handle: MemoryWord) -> None:
        if not handle.attached:
            return
        handle.attached = False
        handle.listeners.clear()
        self._words.remove(handle)

    # Properties

    def set_text(self, handle: MemoryWord, text: str) -> None:
        handle.text = text

    def set_opacity(self, handle: MemoryWord, opacity: float) -> None:
        handle.opacity = opacity
        self._transition(handle)

    def set_width(self, handle: MemoryWord, width: float | None) -> None:
        handle.width = width
        if width is not None:
            self._transition(handle)

    def measure_width(self, handle: MemoryWord) -> float:
        if handle.width is None:
            return self.measure_text(handle.text)
        return handle.width

    def measure_text(self, text: str) -> float:
        return len(text) * self.char_width

    # Notifications

    def subscribe(self, handle: MemoryWord, callback: TransitionCallback) -> None:
        handle.listeners.append(callback)

    def unsubscribe(self, handle: MemoryWord, callback: TransitionCallback) -> None:
        if callback in handle.listeners:
            handle.listeners.remove(callback)

    def complete(self, handle: MemoryWord) -> None:
        """Deliver a transition-complete notification for ``handle``."""
        if not handle.attached:
            logger.debug("complete: ignoring detached word %r", handle.text)
            return
        for callback in list(handle.listeners):
            callback()

    def _transition(self, handle: MemoryWord) -> None:
        if self.auto_complete is None:
            return
        if animating_class(self.namespace) not in handle.classes:
            return
        asyncio.get_running_loop().call_later(self.auto_complete, self.complete, handle)

    # Inspection

    def displayed_tokens(self) -> list[str]:
        """Text of every attached word, in display order."""
        return [word.text for word in self.words()]

    def displayed_text(self) -> str:
        """The sentence currently on display."""
        return "".join(word.text.replace(NBSP, " ") for word in self.words())

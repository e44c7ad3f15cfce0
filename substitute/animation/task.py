"""Per-word animation state machine.

Each edit action becomes an :class:`AnimationTask` that walks a fixed
sequence of steps against one word element. Relabel, detach and cleanup
steps finish immediately; every other step registers exactly one
transition-complete notification on its element and only advances when
that notification arrives.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING

from substitute.animation.renderer import animating_class

if TYPE_CHECKING:
    from substitute.animation.renderer import Renderer, WordHandle

logger = logging.getLogger(__name__)

# Pause before a width change starts, so the width transition is not
# merged with the preceding property change.
RESIZE_DELAY = 0.005


class AnimationKind(Enum):
    """What happens to the word."""

    REMOVE = "remove"
    SUBSTITUTE = "substitute"
    INSERT = "insert"
    KEEP = "keep"


class Step(Enum):
    """One stage of a word animation."""

    RELABEL = "relabel-index"
    FADE_OUT = "fade-out"
    RESIZE = "resize"
    DETACH = "detach"
    FADE_IN = "set-text-and-fade-in"
    CLEANUP = "cleanup"


STEPS: dict[AnimationKind, tuple[Step, ...]] = {
    AnimationKind.REMOVE: (Step.FADE_OUT, Step.RESIZE, Step.DETACH),
    AnimationKind.SUBSTITUTE: (Step.RELABEL, Step.FADE_OUT, Step.RESIZE, Step.FADE_IN, Step.CLEANUP),
    AnimationKind.INSERT: (Step.RESIZE, Step.FADE_IN, Step.CLEANUP),
    AnimationKind.KEEP: (Step.RELABEL,),
}


class AnimationTask:
    """Finite-state machine animating a single word element.

    Parameters
    ----------
    kind : AnimationKind
        Selects the step sequence.
    renderer : Renderer
        Collaborator that owns the element.
    element : WordHandle
        The word element to animate, resolved before the task starts.
    namespace : str
        Class label prefix.
    from_label : str | None
        Index label the element carries now (relabel steps only).
    to_label : str | None
        Index label the element should carry afterwards (relabel steps only).
    text : str
        Text the element ends up with. Empty for removals.
    resize_delay : float
        Seconds to wait before a width change.

    Notes
    -----
    The state is ``(kind, step)`` while running and ``None`` once the last
    step has finished; ``done`` resolves at that point. A notification that
    arrives while no step is waiting is logged and ignored.
    """

    def __init__(
        self,
        kind: AnimationKind,
        renderer: Renderer,
        element: WordHandle,
        *,
        namespace: str,
        from_label: str | None = None,
        to_label: str | None = None,
        text: str = "",
        resize_delay: float = RESIZE_DELAY,
    ) -> None:
        self.kind = kind
        self.steps = STEPS[kind]
        self.cursor = 0
        self.renderer = renderer
        self.element = element
        self.from_label = from_label
        self.to_label = to_label
        self.text = text
        self.resize_delay = resize_delay
        self.animating = animating_class(namespace)
        self._loop = asyncio.get_running_loop()
        self.done: asyncio.Future[None] = self._loop.create_future()
        self._waiting = False
        self._handlers = {
            Step.RELABEL: self._relabel,
            Step.FADE_OUT: self._fade_out,
            Step.RESIZE: self._resize,
            Step.DETACH: self._detach,
            Step.FADE_IN: self._fade_in,
            Step.CLEANUP: self._cleanup,
        }

    def __repr__(self) -> str:
        return f"AnimationTask({self.kind.value}, {self.from_label} -> {self.to_label}, {self.text!r}, state={self.state})"

    @property
    def state(self) -> tuple[AnimationKind, Step] | None:
        """Current (kind, step), or None when finished."""
        if self.cursor >= len(self.steps):
            return None
        return (self.kind, self.steps[self.cursor])

    @property
    def waiting(self) -> bool:
        """True while a step waits for a transition-complete notification."""
        return self._waiting

    def start(self) -> AnimationTask:
        """Run the first step."""
        self._enter()
        return self

    def _enter(self) -> None:
        step = self.steps[self.cursor]
        logger.debug("%s: %s", step.value, self)
        self._handlers[step]()

    def _advance(self) -> None:
        self.cursor += 1
        if self.cursor >= len(self.steps):
            if not self.done.done():
                self.done.set_result(None)
            return
        self._enter()

    def _wait_for_transition(self) -> None:
        self._waiting = True
        self.renderer.subscribe(self.element, self._on_transition_end)

    def _on_transition_end(self) -> None:
        if not self._waiting:
            logger.debug("stray transition notification for %s", self)
            return
        self._waiting = False
        self.renderer.unsubscribe(self.element, self._on_transition_end)
        self._advance()

    # Steps

    def _relabel(self) -> None:
        if self.from_label is not None and self.to_label is not None:
            self.renderer.replace_class(self.element, self.from_label, self.to_label)
        self._advance()

    def _fade_out(self) -> None:
        # Hold the current width while the text fades
        self.renderer.set_width(self.element, self.renderer.measure_width(self.element))
        self.renderer.add_class(self.element, self.animating)
        self._wait_for_transition()
        self.renderer.set_opacity(self.element, 0.0)

    def _resize(self) -> None:
        self.renderer.add_class(self.element, self.animating)
        self._wait_for_transition()
        width = self.renderer.measure_text(self.text)
        self._loop.call_later(self.resize_delay, self.renderer.set_width, self.element, width)

    def _detach(self) -> None:
        self.renderer.detach(self.element)
        self._advance()

    def _fade_in(self) -> None:
        self._wait_for_transition()
        self.renderer.set_text(self.element, self.text)
        self.renderer.set_opacity(self.element, 1.0)

    def _cleanup(self) -> None:
        self.renderer.remove_class(self.element, self.animating)
        self.renderer.set_width(self.element, None)
        self._advance()

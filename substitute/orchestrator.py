"""Sentence rotation loop.

The orchestrator owns the tour as a circular queue of edit plans. Every
interval it takes the plan at the head, hands it to the animation
sequencer and puts it back at the tail, so the cycle repeats forever.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from substitute.animation.renderer import loaded_class
from substitute.animation.sequencer import AnimationSequencer, Dispatch
from substitute.errors import EmptyQueue, MissingContainer
from substitute.planner import plan_edits
from substitute.settings import SubSettings
from substitute.tokenizer import tokenize_all
from substitute.tour import build_tour

if TYPE_CHECKING:
    from substitute.animation.renderer import Renderer
    from substitute.models import EditPlan, TokenSequence

logger = logging.getLogger(__name__)


class Orchestrator:
    """Rotates a container's text among a fixed set of sentences.

    Parameters
    ----------
    sentences : Iterable[str]
        Candidate sentences. May be empty, in which case nothing happens.
    renderer : Renderer
        Collaborator owning the container and its word elements.
    settings : SubSettings | None
        Options. Default is ``SubSettings()``.
    rng : random.Random | None
        Source of randomness for ``settings.random``.

    Raises
    ------
    MissingContainer
        If the renderer has no container named ``settings.container_id``.
    InvalidInput
        If ``sentences`` is not a collection of non-empty strings.

    Notes
    -----
    ``run`` must be called from a running asyncio event loop. Stopping only
    disarms the tick timer; animations already in flight play out.

    ``settings.verbose`` lowers the ``substitute`` logger to DEBUG. Records
    are only printed once the application configures a handler, for
    example with ``logging.basicConfig``.
    """

    def __init__(
        self,
        sentences: Iterable[str],
        renderer: Renderer,
        settings: SubSettings | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or SubSettings()
        self.renderer = renderer
        self.rng = rng

        if self.settings.verbose:
            logging.getLogger("substitute").setLevel(logging.DEBUG)

        mounted = renderer.mount(
            self.settings.container_id,
            self.settings.namespace,
            clear_original_content=self.settings.clear_original_content,
        )
        if not mounted:
            msg = f"Cannot find container with id: {self.settings.container_id}"
            raise MissingContainer(msg)

        self.sequencer = AnimationSequencer(
            renderer,
            namespace=self.settings.namespace,
            speed=self.settings.speed_seconds,
        )
        self.queue: deque[EditPlan] = deque()
        self.last_dispatch: Dispatch | None = None
        self.shown: TokenSequence | None = None
        self.is_empty = True
        self.is_loaded = False
        self.is_paused = False
        self.is_observing = False
        self._timer: asyncio.TimerHandle | None = None

        self.set_sentences(sentences)

    @property
    def is_running(self) -> bool:
        """True while a tick is scheduled."""
        return self._timer is not None

    def set_sentences(self, sentences: Iterable[str]) -> None:
        """Tokenize ``sentences`` and rebuild the tour.

        Words already on display stay until the next tick, which moves them
        to the first sentence of the new tour. A running rotation that had
        nothing to show starts again.
        """
        sequences = tokenize_all(sentences)
        tour = build_tour(
            sequences,
            best=self.settings.best,
            random_start=self.settings.random,
            rng=self.rng,
        )
        self.queue = deque(tour)
        logger.debug("set_sentences: %d plans, total cost %d", len(tour), sum(plan.cost for plan in tour))
        if self.is_observing and not self.is_paused and not self.is_running:
            self._run()

    def run(self) -> Orchestrator:
        """Show the first sentence and start ticking; observe resizes."""
        self.is_observing = True
        self.is_paused = False
        self._run()
        return self

    def stop(self) -> Orchestrator:
        """Stop ticking and stop observing resizes."""
        self.is_observing = False
        self._disarm()
        return self

    def on_resize(self, width: float) -> None:
        """React to a viewport width reported by the resize collaborator.

        Pauses the rotation below ``mobile_width`` and resumes it above.
        """
        threshold = self.settings.mobile_width
        if not self.is_observing or threshold is None:
            return
        if not self.is_paused and width < threshold:
            logger.debug("on_resize: width %s below %s, pausing", width, threshold)
            self._disarm()
            self.is_paused = True
        elif self.is_paused and width > threshold:
            logger.debug("on_resize: width %s above %s, resuming", width, threshold)
            self._run()
            self.is_paused = False

    def advance(self) -> Dispatch:
        """Dispatch the next plan and move it to the back of the queue.

        When the words on display are not where the head plan starts, as
        after ``set_sentences``, a plan from the displayed words to that
        start is dispatched instead and the queue is left as it is.

        Raises
        ------
        EmptyQueue
            If there is no plan to dispatch.
        """
        if not self.queue:
            msg = "No plan available to dispatch"
            raise EmptyQueue(msg)
        head = self.queue[0]
        if self.shown is not None and self.shown != head.source:
            plan = plan_edits(self.shown, head.source)
            logger.debug("advance: bridging %r -> %r (cost %d)", plan.source, plan.target, plan.cost)
        else:
            plan = self.queue.popleft()
            self.queue.append(plan)
            logger.debug("advance: %r -> %r (cost %d)", plan.source, plan.target, plan.cost)
        return self._dispatch(plan)

    def _dispatch(self, plan: EditPlan) -> Dispatch:
        self.last_dispatch = self.sequencer.apply(plan)
        self.shown = plan.target
        return self.last_dispatch

    def _run(self) -> None:
        if not self.queue:
            logger.debug("run: no sentences, nothing to do")
            return

        if self.is_empty:
            self.is_empty = False
            self._dispatch(plan_edits((), self.queue[0].source))

        self._arm()

    def _arm(self) -> None:
        self._disarm()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.settings.interval_seconds, self._on_timer)

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self) -> None:
        self._timer = None
        if not self.is_loaded:
            self.is_loaded = True
            self.renderer.add_container_class(loaded_class(self.settings.namespace))
        if not self.queue:
            logger.debug("tick: no sentences, stopping the timer")
            return
        self.advance()
        self._arm()

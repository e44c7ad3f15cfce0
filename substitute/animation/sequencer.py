"""Dispatch of edit plans to per-word animations.

The sequencer resolves the element behind every action, starts one
:class:`AnimationTask` per action, and reports when the whole plan has
played out. Tasks of one plan run interleaved on the event loop; they
never lock anything, since each addresses its own element by index label.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from substitute.animation.renderer import from_label, to_label, to_prefix
from substitute.animation.task import RESIZE_DELAY, AnimationKind, AnimationTask

if TYPE_CHECKING:
    from substitute.animation.renderer import Renderer, WordHandle
    from substitute.models import EditPlan, Insert, Keep, Remove, Substitute

logger = logging.getLogger(__name__)


@dataclass
class Dispatch:
    """A plan handed to the sequencer.

    Parameters
    ----------
    plan : EditPlan
        The plan being animated.
    tasks : list[AnimationTask]
        Started tasks. Insertion tasks are appended when insertions begin.
    finished : asyncio.Future[None]
        Resolves once every task of the plan has finished.
    """

    plan: EditPlan
    tasks: list[AnimationTask]
    finished: asyncio.Future[None]


class AnimationSequencer:
    """Turns edit plans into word animations.

    Parameters
    ----------
    renderer : Renderer
        Collaborator holding the word elements.
    namespace : str
        Class label prefix.
    speed : float
        Seconds per animation step; insertions start this long after the
        other actions.
    resize_delay : float
        Seconds to wait before each width change.
    """

    def __init__(
        self,
        renderer: Renderer,
        *,
        namespace: str = "sub",
        speed: float = 0.2,
        resize_delay: float = RESIZE_DELAY,
    ) -> None:
        self.renderer = renderer
        self.namespace = namespace
        self.speed = speed
        self.resize_delay = resize_delay

    def sweep(self) -> None:
        """Turn every destination index label back into a source label."""
        prefix = to_prefix(self.namespace)
        for word in self.renderer.words():
            for label in self.renderer.classes(word):
                if label.startswith(prefix):
                    index = int(label[len(prefix) :])
                    logger.debug("sweep: %s -> %s", label, from_label(self.namespace, index))
                    self.renderer.replace_class(word, label, from_label(self.namespace, index))

    def apply(self, plan: EditPlan) -> Dispatch:
        """Start animating ``plan``.

        Substitutions, removals and keeps start at once, in that order.
        Insertions start ``speed`` seconds later, each new element placed
        right after the word that will precede it.

        Returns
        -------
        Dispatch
            Handle on the running animations.
        """
        loop = asyncio.get_running_loop()
        self.sweep()

        tasks: list[AnimationTask] = []
        for substitution in plan.substitutions:
            self._start(tasks, self._substitute_task(substitution))
        for removal in plan.removals:
            self._start(tasks, self._remove_task(removal))
        for keep in plan.keeps:
            self._start(tasks, self._keep_task(keep))

        dispatch = Dispatch(plan=plan, tasks=tasks, finished=loop.create_future())
        loop.call_later(self.speed, self._perform_insertions, dispatch)
        return dispatch

    def _start(self, tasks: list[AnimationTask], task: AnimationTask | None) -> None:
        if task is not None:
            tasks.append(task.start())

    def _lookup(self, label: str, action: object) -> WordHandle | None:
        element = self.renderer.find(label)
        if element is None:
            logger.warning("No word labeled %s for %s; skipping", label, action)
        return element

    def _substitute_task(self, action: Substitute) -> AnimationTask | None:
        source = from_label(self.namespace, action.from_index)
        element = self._lookup(source, action)
        if element is None:
            return None
        return AnimationTask(
            AnimationKind.SUBSTITUTE,
            self.renderer,
            element,
            namespace=self.namespace,
            from_label=source,
            to_label=to_label(self.namespace, action.to_index),
            text=action.to_word,
            resize_delay=self.resize_delay,
        )

    def _remove_task(self, action: Remove) -> AnimationTask | None:
        source = from_label(self.namespace, action.from_index)
        element = self._lookup(source, action)
        if element is None:
            return None
        return AnimationTask(
            AnimationKind.REMOVE,
            self.renderer,
            element,
            namespace=self.namespace,
            from_label=source,
            resize_delay=self.resize_delay,
        )

    def _keep_task(self, action: Keep) -> AnimationTask | None:
        source = from_label(self.namespace, action.from_index)
        element = self._lookup(source, action)
        if element is None:
            return None
        return AnimationTask(
            AnimationKind.KEEP,
            self.renderer,
            element,
            namespace=self.namespace,
            from_label=source,
            to_label=to_label(self.namespace, action.to_index),
        )

    def _insert_task(self, action: Insert) -> AnimationTask:
        anchor = None
        if action.to_index > 0:
            anchor = self.renderer.find(to_label(self.namespace, action.to_index - 1))
            if anchor is None:
                logger.warning("No word precedes insertion %s; appending it", action)
                words = self.renderer.words()
                anchor = words[-1] if words else None

        element = self.renderer.create_word(to_label(self.namespace, action.to_index), after=anchor)
        return AnimationTask(
            AnimationKind.INSERT,
            self.renderer,
            element,
            namespace=self.namespace,
            to_label=to_label(self.namespace, action.to_index),
            text=action.to_word,
            resize_delay=self.resize_delay,
        )

    def _perform_insertions(self, dispatch: Dispatch) -> None:
        for insertion in dispatch.plan.insertions:
            self._start(dispatch.tasks, self._insert_task(insertion))

        logger.debug("apply: %d tasks in flight", len(dispatch.tasks))
        pending = asyncio.gather(*(task.done for task in dispatch.tasks))
        pending.add_done_callback(lambda _: _resolve(dispatch.finished))


def _resolve(future: asyncio.Future[None]) -> None:
    if not future.done():
        future.set_result(None)

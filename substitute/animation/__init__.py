"""Word animation layer.

This module turns edit plans into per-word state machines that drive a
rendering collaborator and wait on its transition-complete notifications.
"""

from substitute.animation.memory import MemoryRenderer, MemoryWord
from substitute.animation.renderer import Renderer, WordHandle
from substitute.animation.sequencer import AnimationSequencer, Dispatch
from substitute.animation.task import STEPS, AnimationKind, AnimationTask, Step

__all__ = [
    "STEPS",
    "AnimationKind",
    "AnimationSequencer",
    "AnimationTask",
    "Dispatch",
    "MemoryRenderer",
    "MemoryWord",
    "Renderer",
    "Step",
    "WordHandle",
]

"""Word-level sentence rotation.

This library rotates a container's text among a set of sentences,
animating each change word by word: kept words stay, changed words
cross-fade, removed words collapse and new words expand.

Examples
--------
>>> from substitute import plan_edits, tokenize

>>> plan = plan_edits(tokenize("The quick fox"), tokenize("The slow fox"))
>>> [(s.from_word, s.to_word) for s in plan.substitutions]
[('quick\\xa0', 'slow\\xa0')]

>>> from substitute import build_tour
>>> tour = build_tour([tokenize("Hello world"), tokenize("Hello there")])
>>> len(tour)
2
"""

from substitute.errors import (
    ConfigurationError,
    EmptyQueue,
    InvalidInput,
    MissingContainer,
    SubstituteError,
)
from substitute.models import (
    NBSP,
    EditAction,
    EditPlan,
    Insert,
    Keep,
    Remove,
    Substitute,
    TokenSequence,
    join_tokens,
    strip_marker,
)
from substitute.orchestrator import Orchestrator
from substitute.planner import plan_edits
from substitute.settings import SubSettings, load_settings
from substitute.tokenizer import tokenize, tokenize_all
from substitute.tour import PlanMatrix, build_plan_matrix, build_tour

__all__ = [
    "NBSP",
    "ConfigurationError",
    "EditAction",
    "EditPlan",
    "EmptyQueue",
    "Insert",
    "InvalidInput",
    "Keep",
    "MissingContainer",
    "Orchestrator",
    "PlanMatrix",
    "Remove",
    "SubSettings",
    "Substitute",
    "SubstituteError",
    "TokenSequence",
    "build_plan_matrix",
    "build_tour",
    "join_tokens",
    "load_settings",
    "plan_edits",
    "strip_marker",
    "tokenize",
    "tokenize_all",
]

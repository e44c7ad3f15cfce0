"""Data models for sentence transitions.

This module defines the value types shared by the planner, the tour
builder and the animation layer: tokens, the four edit actions, and the
edit plan that groups them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Appended to a token whose source text was followed by a space, so that
# inline-block rendering keeps the visual gap.
NBSP = "\u00a0"

TokenSequence = tuple[str, ...]


def has_marker(token: str) -> bool:
    """Return True if the token carries the attached-space marker."""
    return token.endswith(NBSP)


def strip_marker(token: str) -> str:
    """Return the token text without the attached-space marker."""
    return token[: -len(NBSP)] if has_marker(token) else token


def join_tokens(tokens: tuple[str, ...] | list[str]) -> str:
    """Rebuild display text from a token sequence.

    Parameters
    ----------
    tokens : tuple[str, ...] | list[str]
        Tokens as produced by the tokenizer.

    Returns
    -------
    str
        The text with a single space wherever a token was marked.

    Examples
    --------
    >>> join_tokens(("Hello\\u00a0", "world", "!"))
    'Hello world!'
    """
    return "".join(strip_marker(token) + (" " if has_marker(token) else "") for token in tokens)


@dataclass(frozen=True)
class Keep:
    """A word present in both sentences; only its index label changes.

    Parameters
    ----------
    from_index : int
        Position in the source sentence.
    to_index : int
        Position in the target sentence.
    from_word : str
        Token in the source sentence.
    to_word : str
        Token in the target sentence (equal to ``from_word``).
    """

    from_index: int
    to_index: int
    from_word: str
    to_word: str


@dataclass(frozen=True)
class Substitute:
    """A source word replaced in place by a different target word.

    Parameters
    ----------
    from_index : int
        Position of the replaced word in the source sentence.
    to_index : int
        Position of the replacement in the target sentence.
    from_word : str
        The replaced token.
    to_word : str
        The replacement token.
    """

    from_index: int
    to_index: int
    from_word: str
    to_word: str


@dataclass(frozen=True)
class Remove:
    """A source word with no counterpart in the target sentence."""

    from_index: int
    from_word: str


@dataclass(frozen=True)
class Insert:
    """A target word with no counterpart in the source sentence."""

    to_index: int
    to_word: str


EditAction = Union[Keep, Substitute, Remove, Insert]


@dataclass(frozen=True)
class EditPlan:
    """Actions that transform one tokenized sentence into another.

    Parameters
    ----------
    source : TokenSequence
        The sentence displayed before the transition.
    target : TokenSequence
        The sentence displayed after the transition.
    keeps : tuple[Keep, ...]
        Words that stay and are relabeled.
    substitutions : tuple[Substitute, ...]
        Words that cross-fade into a different word.
    removals : tuple[Remove, ...]
        Words that fade out and collapse.
    insertions : tuple[Insert, ...]
        Words that expand and fade in.
    cost : int
        Number of non-keep actions.

    Examples
    --------
    >>> from substitute.planner import plan_edits
    >>> plan = plan_edits(("a", "b"), ("a", "c"))
    >>> plan.cost, len(plan.keeps), len(plan.substitutions)
    (1, 1, 1)
    """

    source: TokenSequence
    target: TokenSequence
    keeps: tuple[Keep, ...]
    substitutions: tuple[Substitute, ...]
    removals: tuple[Remove, ...]
    insertions: tuple[Insert, ...]
    cost: int

    @property
    def actions(self) -> tuple[EditAction, ...]:
        """All actions in dispatch order: substitutions, removals, keeps, insertions."""
        return (*self.substitutions, *self.removals, *self.keeps, *self.insertions)

    @property
    def is_identity(self) -> bool:
        """True if the plan keeps every word."""
        return self.cost == 0 and len(self.keeps) == len(self.source) == len(self.target)

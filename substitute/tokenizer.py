"""Sentence tokenizer.

Splits a raw sentence into words and single punctuation marks. Tokens
that were followed by a space in the raw text carry the attached-space
marker (see :data:`substitute.models.NBSP`).
"""

from __future__ import annotations

from collections.abc import Iterable

from substitute.errors import InvalidInput
from substitute.models import NBSP, TokenSequence

# Characters that detach from the surrounding word. Whitespace detaches too.
# Everything else (including -#$%^&_`~') stays part of the word.
BOUNDARY_PUNCTUATION = frozenset('.,"/!?*+;:{}=()[]')


def is_boundary(char: str) -> bool:
    """Return True if ``char`` ends the pending word."""
    return char in BOUNDARY_PUNCTUATION or char.isspace()


def tokenize(raw: str) -> TokenSequence:
    """Tokenize a sentence into words and punctuation.

    Parameters
    ----------
    raw : str
        The sentence. Must be a non-empty string.

    Returns
    -------
    TokenSequence
        Tokens in reading order.

    Raises
    ------
    InvalidInput
        If ``raw`` is not a string or is empty.

    Examples
    --------
    >>> [t.replace("\\u00a0", "_") for t in tokenize("Hi there, you!")]
    ['Hi_', 'there', ',_', 'you', '!']
    """
    if not isinstance(raw, str) or not raw:
        msg = f"sentence must be a non-empty string, got {raw!r}"
        raise InvalidInput(msg)

    tokens: list[str] = []
    start = 0
    n = len(raw)

    for end, char in enumerate(raw):
        if not is_boundary(char):
            continue

        # Flush the word built so far
        if end > start:
            word = raw[start:end]
            tokens.append(word + NBSP if char.isspace() else word)

        # Punctuation becomes its own token
        if not char.isspace():
            followed_by_space = end + 1 < n and raw[end + 1].isspace()
            tokens.append(char + NBSP if followed_by_space else char)

        start = end + 1

    if start < n:
        tokens.append(raw[start:])

    return tuple(tokens)


def tokenize_all(raw_sentences: Iterable[str]) -> list[TokenSequence]:
    """Tokenize every sentence of a collection.

    Raises
    ------
    InvalidInput
        If ``raw_sentences`` is not a collection of strings, or any
        sentence is empty.
    """
    if raw_sentences is None or isinstance(raw_sentences, (str, bytes)) or not isinstance(raw_sentences, Iterable):
        msg = "sentences must be a collection of strings"
        raise InvalidInput(msg)
    return [tokenize(raw) for raw in raw_sentences]

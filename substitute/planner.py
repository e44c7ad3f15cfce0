"""Word-level edit planning between two tokenized sentences.

The planner is a greedy walk over both sentences with a single step of
lookahead. It is not a minimum edit distance: its decisions, including
the tie-breaks, define which words keep their element, which
cross-fade, and which collapse or expand on screen.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from substitute.models import EditPlan, Insert, Keep, Remove, Substitute

logger = logging.getLogger(__name__)


def find_from(source: Sequence[str], token: str, start: int) -> int:
    """Return the first index >= ``start`` where ``source`` holds ``token``, or -1."""
    for index in range(start, len(source)):
        if source[index] == token:
            return index
    return -1


def probe(source: Sequence[str], target: Sequence[str], from_index: int, to_index: int) -> int:
    """Look one step ahead from a cursor pair without planning anything.

    Parameters
    ----------
    source : Sequence[str]
        The sentence being transformed.
    target : Sequence[str]
        The sentence to reach.
    from_index : int
        Cursor into ``source``.
    to_index : int
        Cursor into ``target``.

    Returns
    -------
    int
        0 if the tokens under the cursors match; the index in ``source``
        (at or after ``from_index``) holding ``target[to_index]``, or -1
        when there is none. Past the end of either sentence, the number of
        words left on the other side.
    """
    if from_index >= len(source):
        return len(target) - to_index
    if to_index >= len(target):
        return len(source) - from_index
    if source[from_index] == target[to_index]:
        return 0
    return find_from(source, target[to_index], from_index)


def plan_edits(source: Sequence[str], target: Sequence[str]) -> EditPlan:  # noqa: PLR0912, PLR0915
    """Compute the actions that turn ``source`` into ``target``.

    Parameters
    ----------
    source : Sequence[str]
        Tokens currently displayed.
    target : Sequence[str]
        Tokens to display next.

    Returns
    -------
    EditPlan
        The keeps, substitutions, removals and insertions, and their cost
        (one per non-keep action).

    Examples
    --------
    >>> plan = plan_edits(("The", "quick", "brown", "fox"), ("The", "brown", "fox"))
    >>> [r.from_word for r in plan.removals], plan.cost
    (['quick'], 1)
    """
    source = tuple(source)
    target = tuple(target)
    n_from = len(source)
    n_to = len(target)

    keeps: list[Keep] = []
    substitutions: list[Substitute] = []
    removals: list[Remove] = []
    insertions: list[Insert] = []
    cost = 0

    def keep(i: int, j: int) -> None:
        keeps.append(Keep(from_index=i, to_index=j, from_word=source[i], to_word=target[j]))

    def substitute(i: int, j: int) -> None:
        substitutions.append(Substitute(from_index=i, to_index=j, from_word=source[i], to_word=target[j]))

    def remove(i: int) -> None:
        removals.append(Remove(from_index=i, from_word=source[i]))

    def insert(j: int) -> None:
        insertions.append(Insert(to_index=j, to_word=target[j]))

    i = j = 0
    while True:
        # Source exhausted: everything left in target is new
        if i >= n_from:
            for k in range(j, n_to):
                insert(k)
            cost += n_to - j
            break

        # Target exhausted: everything left in source goes away
        if j >= n_to:
            for k in range(i, n_from):
                remove(k)
            cost += n_from - i
            break

        if source[i] == target[j]:
            keep(i, j)
            i += 1
            j += 1
            continue

        found = find_from(source, target[j], i)

        # Last source word and nothing to match: swap it in place
        if i == n_from - 1 and found == -1:
            substitute(i, j)
            i += 1
            j += 1
            cost += 1
            continue

        future = probe(source, target, i, j + 1)

        if found == -1:
            if future == 0:
                # The next target word matches here, so this one is new
                insert(j)
                j += 1
            else:
                substitute(i, j)
                i += 1
                j += 1
            cost += 1
            continue

        if (found == i + 1 and future == i) or found == future:
            if n_from - i > n_to - j:
                insert(j)
                j += 1
            else:
                remove(i)
                i += 1
            cost += 1
            continue

        if found > future and future != -1:
            substitute(i, j)
            i += 1
            j += 1
            cost += 1
            continue

        # The match comes first: drop the words in between and keep it
        for k in range(i, found):
            remove(k)
        keep(found, j)
        cost += found - i
        i = found + 1
        j += 1

    plan = EditPlan(
        source=source,
        target=target,
        keeps=tuple(keeps),
        substitutions=tuple(substitutions),
        removals=tuple(removals),
        insertions=tuple(insertions),
        cost=cost,
    )
    logger.debug(
        "plan_edits: %r -> %r cost=%d (keep=%d sub=%d remove=%d insert=%d)",
        source,
        target,
        cost,
        len(keeps),
        len(substitutions),
        len(removals),
        len(insertions),
    )
    return plan

"""Cyclic ordering of candidate sentences.

This module builds the pairwise edit-plan matrix between all sentences
and walks it with a nearest-neighbour heuristic to obtain a closed tour
that keeps the number of animated word changes low.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from substitute.planner import plan_edits

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    from substitute.models import EditPlan, TokenSequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanMatrix:
    """Edit plans between every ordered pair of sentences.

    Parameters
    ----------
    costs : NDArray[np.float64]
        ``costs[i, j]`` is the cost of going from sentence ``i`` to
        sentence ``j``. The diagonal is ``np.inf`` and never selected.
    plans : tuple[tuple[EditPlan | None, ...], ...]
        ``plans[i][j]`` is the plan behind ``costs[i, j]``; ``None`` on the
        diagonal.
    """

    costs: NDArray[np.float64]
    plans: tuple[tuple[EditPlan | None, ...], ...]

    @property
    def size(self) -> int:
        """Number of sentences."""
        return len(self.plans)

    def plan(self, from_index: int, to_index: int) -> EditPlan:
        """Return the plan from one sentence to another.

        Raises
        ------
        ValueError
            If both indices name the same sentence.
        """
        result = self.plans[from_index][to_index]
        if result is None:
            msg = f"No plan from sentence {from_index} to itself"
            raise ValueError(msg)
        return result


def build_plan_matrix(sequences: Sequence[TokenSequence]) -> PlanMatrix:
    """Plan every transition between distinct sentences.

    Parameters
    ----------
    sequences : Sequence[TokenSequence]
        Tokenized sentences.

    Returns
    -------
    PlanMatrix
        Costs and plans of shape (N, N).
    """
    n = len(sequences)
    costs = np.full((n, n), np.inf, dtype=np.float64)
    plans: list[tuple[EditPlan | None, ...]] = []

    for i, source in enumerate(sequences):
        row: list[EditPlan | None] = []
        for j, target in enumerate(sequences):
            if i == j:
                row.append(None)
                continue
            plan = plan_edits(source, target)
            costs[i, j] = plan.cost
            row.append(plan)
        plans.append(tuple(row))

    return PlanMatrix(costs=costs, plans=tuple(plans))


def nearest_neighbour_tour(matrix: PlanMatrix) -> list[EditPlan]:
    """Walk the plan matrix greedily into a closed tour.

    Starts from the sentence whose cheapest outgoing transition is the
    cheapest overall, then repeatedly follows the cheapest transition to a
    sentence not yet departed from. The last step returns to the start.

    Parameters
    ----------
    matrix : PlanMatrix
        Pairwise plans for at least two sentences.

    Returns
    -------
    list[EditPlan]
        Exactly ``matrix.size`` plans; plan ``k`` ends where plan ``k + 1``
        begins, and the last one ends where the first begins.

    Notes
    -----
    Ties are broken by original sentence order (stable sorts throughout).
    The result is a heuristic, not an optimal tour.
    """
    n = matrix.size
    if n < 2:  # noqa: PLR2004
        msg = f"A nearest-neighbour tour needs at least two sentences, got {n}"
        raise ValueError(msg)

    # Columns of each row by ascending cost
    order: NDArray[np.intp] = np.argsort(matrix.costs, axis=1, kind="stable")
    # np.argmin keeps the first row among equal minimums
    first = int(np.argmin(matrix.costs.min(axis=1)))

    tour: list[EditPlan] = []
    used: set[int] = set()
    current = first

    for step in range(n):
        closing = step == n - 1
        for column in order[current]:
            target = int(column)
            if target == current:
                continue
            if (closing and target == first) or (not closing and target not in used):
                tour.append(matrix.plan(current, target))
                used.add(current)
                current = target
                break

    logger.debug(
        "nearest_neighbour_tour: start=%d total_cost=%d",
        first,
        sum(plan.cost for plan in tour),
    )
    return tour


def ring_tour(
    sequences: Sequence[TokenSequence],
    *,
    shuffle: bool = False,
    rng: random.Random | None = None,
) -> list[EditPlan]:
    """Visit sentences in the given (or a shuffled) order.

    Plan ``i`` goes from sentence ``i - 1`` to sentence ``i``, so the
    first plan wraps around from the last sentence.
    """
    ordered = list(sequences)
    if shuffle:
        (rng or random.Random()).shuffle(ordered)
    return [plan_edits(ordered[i - 1], ordered[i]) for i in range(len(ordered))]


def build_tour(
    sequences: Sequence[TokenSequence],
    *,
    best: bool = True,
    random_start: bool = False,
    rng: random.Random | None = None,
) -> list[EditPlan]:
    """Build the cyclic plan sequence for a set of sentences.

    Parameters
    ----------
    sequences : Sequence[TokenSequence]
        Tokenized sentences.
    best : bool
        Order sentences to keep transitions cheap. When False, sentences
        are visited in the given order.
    random_start : bool
        With ``best``, rotate the finished tour by a random offset.
        Without it, shuffle the sentence order.
    rng : random.Random | None
        Source of randomness. Default is a fresh ``random.Random()``.

    Returns
    -------
    list[EditPlan]
        One plan per sentence. Empty for no sentences; a single identity
        plan for one sentence.
    """
    n = len(sequences)
    if n == 0:
        return []
    if n == 1:
        return [plan_edits(sequences[0], sequences[0])]

    if not best:
        return ring_tour(sequences, shuffle=random_start, rng=rng)

    tour = nearest_neighbour_tour(build_plan_matrix(sequences))

    if random_start:
        offset = (rng or random.Random()).randrange(n)
        tour = tour[offset:] + tour[:offset]

    return tour

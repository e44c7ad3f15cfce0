"""Tests for the edit planner."""

import pytest

from substitute.models import EditPlan, Insert, Keep, Remove, Substitute
from substitute.planner import find_from, plan_edits, probe
from substitute.tokenizer import tokenize

FROM = ["The", "quick", "brown", "fox", "is", "very", "cool", ",", "supposedly", "."]
TO = ["The", "brown", "color", "is", "very", "very", "pretty", ",", "no", "?"]

SENTENCES = [
    "The quick brown fox is very cool, supposedly.",
    "The brown color is very very pretty, no?",
    "We're here (in Wilkes-Barre), finally!",
    "We are here, finally.",
    "I like cats.",
    "I really like dogs and cats!",
    "a b c d e",
    "e d c b a",
    "a a a",
    "a",
]

PAIRS = [(a, b) for a in SENTENCES for b in SENTENCES]


def assert_covers(plan: EditPlan) -> None:
    """Check every index of both sentences is covered exactly once."""
    from_indices = (
        [k.from_index for k in plan.keeps]
        + [s.from_index for s in plan.substitutions]
        + [r.from_index for r in plan.removals]
    )
    to_indices = (
        [k.to_index for k in plan.keeps]
        + [s.to_index for s in plan.substitutions]
        + [i.to_index for i in plan.insertions]
    )
    assert sorted(from_indices) == list(range(len(plan.source)))
    assert sorted(to_indices) == list(range(len(plan.target)))


class TestReferenceScenario:
    """The documented reference transition."""

    @pytest.fixture
    def plan(self) -> EditPlan:
        """Plan the reference transition."""
        return plan_edits(FROM, TO)

    def test_counts(self, plan: EditPlan) -> None:
        """Test the number of each action and the cost."""
        assert len(plan.substitutions) == 4
        assert len(plan.removals) == 1
        assert len(plan.insertions) == 1
        assert len(plan.keeps) == 5
        assert plan.cost == 6

    def test_substitutions(self, plan: EditPlan) -> None:
        """Test the exact substitutions."""
        assert plan.substitutions == (
            Substitute(from_index=3, to_index=2, from_word="fox", to_word="color"),
            Substitute(from_index=6, to_index=5, from_word="cool", to_word="very"),
            Substitute(from_index=8, to_index=8, from_word="supposedly", to_word="no"),
            Substitute(from_index=9, to_index=9, from_word=".", to_word="?"),
        )

    def test_removal_and_insertion(self, plan: EditPlan) -> None:
        """Test the removed and inserted words."""
        assert plan.removals == (Remove(from_index=1, from_word="quick"),)
        assert plan.insertions == (Insert(to_index=6, to_word="pretty"),)

    def test_keeps(self, plan: EditPlan) -> None:
        """Test the kept words and their new positions."""
        assert [(k.from_index, k.to_index, k.from_word) for k in plan.keeps] == [
            (0, 0, "The"),
            (2, 1, "brown"),
            (4, 3, "is"),
            (5, 4, "very"),
            (7, 7, ","),
        ]

    def test_sequences_recorded(self, plan: EditPlan) -> None:
        """Test the plan records both sentences as tuples."""
        assert plan.source == tuple(FROM)
        assert plan.target == tuple(TO)

    def test_dispatch_order(self, plan: EditPlan) -> None:
        """Test actions list substitutions, removals, keeps, then insertions."""
        kinds = [type(action) for action in plan.actions]
        assert kinds == [Substitute] * 4 + [Remove] + [Keep] * 5 + [Insert]


class TestPlanProperties:
    """Invariants that hold for every pair of sentences."""

    @pytest.mark.parametrize(("source", "target"), PAIRS)
    def test_cost_counts_changes(self, source: str, target: str) -> None:
        """Test cost equals substitutions + removals + insertions."""
        plan = plan_edits(tokenize(source), tokenize(target))
        assert plan.cost == len(plan.substitutions) + len(plan.removals) + len(plan.insertions)

    @pytest.mark.parametrize(("source", "target"), PAIRS)
    def test_coverage(self, source: str, target: str) -> None:
        """Test every from-index and to-index is covered exactly once."""
        assert_covers(plan_edits(tokenize(source), tokenize(target)))

    @pytest.mark.parametrize(("source", "target"), PAIRS)
    def test_keeps_match(self, source: str, target: str) -> None:
        """Test kept words are equal on both sides and in the right place."""
        plan = plan_edits(tokenize(source), tokenize(target))
        for keep in plan.keeps:
            assert keep.from_word == keep.to_word
            assert plan.source[keep.from_index] == keep.from_word
            assert plan.target[keep.to_index] == keep.to_word

    @pytest.mark.parametrize("sentence", SENTENCES)
    def test_reflexive(self, sentence: str) -> None:
        """Test a sentence planned against itself only keeps words."""
        tokens = tokenize(sentence)
        plan = plan_edits(tokens, tokens)
        assert plan.cost == 0
        assert plan.is_identity
        assert not plan.substitutions
        assert not plan.removals
        assert not plan.insertions
        assert [(k.from_index, k.to_index) for k in plan.keeps] == [(i, i) for i in range(len(tokens))]


class TestPlanEdgeCases:
    """Empty sentences and the lookahead branches."""

    def test_from_empty(self) -> None:
        """Test that an empty source inserts every word."""
        plan = plan_edits((), ("a", "b"))
        assert plan.insertions == (Insert(0, "a"), Insert(1, "b"))
        assert plan.cost == 2

    def test_to_empty(self) -> None:
        """Test that an empty target removes every word with absolute indices."""
        plan = plan_edits(("a", "b", "c"), ())
        assert plan.removals == (Remove(0, "a"), Remove(1, "b"), Remove(2, "c"))
        assert plan.cost == 3

    def test_both_empty(self) -> None:
        """Test the empty plan."""
        plan = plan_edits((), ())
        assert plan.cost == 0
        assert plan.actions == ()

    def test_trailing_insertions_use_absolute_indices(self) -> None:
        """Test insertions after the source runs out keep target positions."""
        plan = plan_edits(("a",), ("a", "b", "c"))
        assert plan.insertions == (Insert(1, "b"), Insert(2, "c"))

    def test_skip_to_match(self) -> None:
        """Test that words before a nearer match are removed."""
        plan = plan_edits(("The", "quick", "brown", "fox"), ("The", "brown", "fox"))
        assert plan.removals == (Remove(1, "quick"),)
        assert plan.cost == 1

    def test_insert_when_next_word_matches(self) -> None:
        """Test a new word is inserted when the following word lines up."""
        plan = plan_edits(("I", "like", "cats"), ("I", "really", "like", "cats"))
        assert plan.insertions == (Insert(1, "really"),)
        assert plan.cost == 1

    def test_substitute_last_word(self) -> None:
        """Test the last source word is substituted when nothing matches."""
        plan = plan_edits(("a", "b"), ("a", "c"))
        assert plan.substitutions == (Substitute(1, 1, "b", "c"),)
        assert plan.cost == 1

    def test_tie_with_more_target_left_removes(self) -> None:
        """Test the tie-break removes when the target has as much or more left."""
        # found == from_index + 1 and the next target word sits at from_index
        plan = plan_edits(("x", "a"), ("a", "x", "y"))
        assert plan.removals[0] == Remove(0, "x")
        assert_covers(plan)

    def test_tie_with_more_source_left_inserts(self) -> None:
        """Test the tie-break inserts when the source has more left."""
        plan = plan_edits(("x", "a", "b", "c"), ("a", "x"))
        assert plan.insertions[0] == Insert(0, "a")
        assert_covers(plan)


class TestHelpers:
    """Tests for the lookahead helpers."""

    def test_find_from(self) -> None:
        """Test searching from a start index."""
        assert find_from(("a", "b", "a"), "a", 1) == 2
        assert find_from(("a", "b"), "c", 0) == -1

    def test_probe_match(self) -> None:
        """Test a matching cursor probes to zero."""
        assert probe(("a", "b"), ("x", "b"), 1, 1) == 0

    def test_probe_found(self) -> None:
        """Test a mismatch probes to the matching source index."""
        assert probe(("a", "b", "c"), ("c",), 0, 0) == 2

    def test_probe_missing(self) -> None:
        """Test a mismatch with no match probes to -1."""
        assert probe(("a", "b"), ("z",), 0, 0) == -1

    def test_probe_past_end(self) -> None:
        """Test probing past either end counts the words left."""
        assert probe(("a", "b", "c"), ("a",), 1, 1) == 2
        assert probe(("a",), ("a", "b", "c"), 1, 1) == 2

    def test_probe_does_not_plan(self) -> None:
        """Test probing leaves a later plan unchanged."""
        source, target = tuple(FROM), tuple(TO)
        before = plan_edits(source, target)
        probe(source, target, 1, 2)
        assert plan_edits(source, target) == before

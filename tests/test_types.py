"""Tests for Scored / rank / unwrap."""
import dataclasses

import pytest

from beacon_score.types import Scored, rank, unwrap


@pytest.fixture
def scored():
    return [Scored("b", 2.0), Scored("a", 5.0), Scored("c", 0.5), Scored("d", 3.0)]


class TestScored:
    def test_higher_score_sorts_first(self):
        assert Scored("x", 5.0) < Scored("y", 2.0)
        assert Scored("y", 2.0) > Scored("x", 5.0)

    def test_builtin_sort_is_descending(self, scored):
        assert [s.score for s in sorted(scored)] == [5.0, 3.0, 2.0, 0.5]

    def test_is_frozen(self):
        s = Scored("x", 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.score = 2.0


class TestRank:
    def test_descending(self, scored):
        ranked = rank(scored)
        assert [s.item for s in ranked] == ["a", "d", "b", "c"]
        assert all(a.score >= b.score for a, b in zip(ranked, ranked[1:]))

    def test_input_not_mutated(self, scored):
        before = list(scored)
        ranked = rank(scored)
        assert ranked is not scored
        assert scored == before

    def test_accepts_any_iterable(self, scored):
        assert [s.score for s in rank(iter(scored))] == [5.0, 3.0, 2.0, 0.5]

    def test_empty(self):
        assert rank([]) == []


class TestUnwrap:
    def test_preserves_order(self, scored):
        assert unwrap(scored) == ["b", "a", "c", "d"]
        assert unwrap(rank(scored)) == ["a", "d", "b", "c"]

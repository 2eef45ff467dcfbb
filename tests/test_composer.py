"""
Unit tests for via-queries (PathComposer).
"""

import itertools

import pytest

from wikipath.errors import UnknownLabelError
from wikipath.graph import build


class TestScenarios:
    """Concrete via-query scenarios on the diamond graph."""

    def test_forced_detour(self, diamond):
        """Through D gives A->D->C even though A->B->C is found first directly."""
        assert diamond.shortest_path_via("A", "D", "C") == ["A", "D", "C"]
        assert diamond.shortest_path_via_length("A", "D", "C") == 2

    def test_required_is_origin(self, diamond):
        assert diamond.shortest_path_via("A", "A", "C") == ["A", "B", "C"]

    def test_required_is_destination(self, diamond):
        assert diamond.shortest_path_via("A", "C", "C") == ["A", "B", "C"]

    def test_all_three_identical(self, diamond):
        """Both halves collapse to [X], so the result is [X]."""
        assert diamond.shortest_path_via("B", "B", "B") == ["B"]
        assert diamond.shortest_path_via_length("B", "B", "B") == 0

    def test_unreachable_required(self, diamond):
        """No path via E even though A reaches C directly."""
        assert diamond.shortest_path("A", "C") != []
        assert diamond.shortest_path_via("A", "E", "C") == []
        assert diamond.shortest_path_via_length("A", "E", "C") == -1

    def test_second_half_missing(self, diamond):
        """A reaches B, but B cannot reach D."""
        assert diamond.shortest_path_via("A", "B", "D") == []

    def test_walk_may_revisit(self):
        """The composed walk can go back through the origin."""
        finder = build(["A", "B"], [("A", "B"), ("B", "A")])
        assert finder.shortest_path_via("A", "B", "A") == ["A", "B", "A"]
        assert finder.shortest_path_via_length("A", "B", "A") == 2

    def test_unknown_required_label(self, diamond):
        with pytest.raises(UnknownLabelError):
            diamond.shortest_path_via("A", "Z", "C")


class TestCompositionProperties:
    """Composition against the two independent halves."""

    @pytest.mark.parametrize("seed", range(10))
    def test_composition(self, seed, random_graph):
        """Via-path is first[:-1] + second, or [] when a half is missing."""
        labels, edges = random_graph(seed, size=5, edge_prob=0.35)
        finder = build(labels, edges)

        for a, m, b in itertools.product(labels, repeat=3):
            first = finder.shortest_path(a, m)
            second = finder.shortest_path(m, b)
            via = finder.shortest_path_via(a, m, b)

            if not first or not second:
                assert via == []
                assert finder.shortest_path_via_length(a, m, b) == -1
                continue

            assert via[0] == a
            assert via[-1] == b
            assert m in via
            assert len(via) == len(first) + len(second) - 1
            assert finder.shortest_path_via_length(a, m, b) == len(via) - 1

"""Tests for display-grade aggregation."""

import pytest

from climbset.constants import V_GRADES
from climbset.grades import (
    UNGRADED_INDEX,
    average_rating,
    calculate_display_grade,
    display_grade_index,
    grade_to_index,
    index_to_grade,
    sort_by_display_grade,
)
from climbset.models import Ascent, RouteSummary

SHORT_SCALE = ("VB", "V0", "V1", "V2", "V3", "V4", "V5")


def _ascents(*grades):
    return [Ascent(grade_v=grade) for grade in grades]


class TestGradeToIndex:
    """Tests for grade_to_index."""

    def test_known_grades(self) -> None:
        """VB is index 0, V17 the last index."""
        assert grade_to_index("VB") == 0
        assert grade_to_index("V3") == 4
        assert grade_to_index("V17") == len(V_GRADES) - 1

    @pytest.mark.parametrize("grade", [None, "", "5a", "v3", "V18"])
    def test_missing_or_unknown_is_none(self, grade) -> None:
        """No grade is distinct from index 0."""
        assert grade_to_index(grade) is None


class TestIndexToGrade:
    """Tests for index_to_grade."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "VB"), (1.49, "V0"), (1.5, "V1"), (2.5, "V2"), (3.5, "V3"), (0.5, "V0")],
    )
    def test_rounds_half_away_from_zero(self, value, expected) -> None:
        """Halves always round up for non-negative indices."""
        assert index_to_grade(value) == expected

    @pytest.mark.parametrize("value", [-1, -0.6, len(V_GRADES), 100, float("nan")])
    def test_out_of_range_is_none(self, value) -> None:
        """Values outside the scale are ungraded, not errors."""
        assert index_to_grade(value) is None

    def test_small_negative_rounds_to_zero(self) -> None:
        """-0.4 rounds to 0 and is on the scale."""
        assert index_to_grade(-0.4) == "VB"


class TestCalculateDisplayGrade:
    """Tests for calculate_display_grade."""

    def test_setter_only(self) -> None:
        """With no ascents the setter grade is used verbatim."""
        assert calculate_display_grade("V2", [], SHORT_SCALE) == "V2"

    def test_climbers_only(self) -> None:
        """Without a setter grade the climber mean is used."""
        assert calculate_display_grade(None, _ascents("V0", "V2"), SHORT_SCALE) == "V1"

    def test_equal_blend(self) -> None:
        """Setter V4 and climbers V2,V2 blend to V3."""
        assert calculate_display_grade("V4", _ascents("V2", "V2"), SHORT_SCALE) == "V3"

    def test_nothing_is_ungraded(self) -> None:
        """No setter and no ascents is ungraded."""
        assert calculate_display_grade(None, [], SHORT_SCALE) is None
        assert calculate_display_grade(None, None) is None

    def test_ungraded_ascents_are_excluded(self) -> None:
        """Ascents without grades do not pull the average towards VB."""
        ascents = _ascents("V3", None, "V3")
        # setter idx 2, climber mean idx 4 -> 3 -> V2
        assert calculate_display_grade("V1", ascents, SHORT_SCALE) == "V2"

    def test_only_ungraded_ascents_fall_back_to_setter(self) -> None:
        """If every ascent lacks a grade the setter grade stands."""
        assert calculate_display_grade("V1", _ascents(None, ""), SHORT_SCALE) == "V1"

    def test_unknown_setter_grade_treated_as_missing(self) -> None:
        """Garbage setter grades degrade gracefully."""
        assert calculate_display_grade("6b+", _ascents("V4")) == "V4"
        assert calculate_display_grade("6b+", []) is None

    def test_half_rounds_up(self) -> None:
        """Setter V1 with climber V2 blends to index 2.5 -> V2."""
        assert calculate_display_grade("V1", _ascents("V2")) == "V2"

    def test_order_independent(self) -> None:
        """Ascent order does not affect the result."""
        grades = ["V0", "V5", "V2", "V3"]
        forward = calculate_display_grade("V4", _ascents(*grades))
        backward = calculate_display_grade("V4", _ascents(*reversed(grades)))
        assert forward == backward

    def test_accepts_mappings(self) -> None:
        """Plain ascent records from the feed work too."""
        ascents = [{"grade_v": "V2"}, {"grade_v": "V2"}, {"rating": 3}, {"grade_v": 7}]
        assert calculate_display_grade("V4", ascents) == "V3"

    def test_skips_non_record_entries(self) -> None:
        """None entries are ignored rather than raising."""
        assert calculate_display_grade("V1", [None, {"grade_v": "V3"}]) == "V2"

    def test_accepts_bare_grade_strings(self) -> None:
        """A plain grade string counts as that suggested grade."""
        assert calculate_display_grade("V4", ["V2", "V2"]) == "V3"
        assert calculate_display_grade(None, ["V5", 42, "V9000"]) == "V5"


class TestDisplayGradeIndex:
    """Tests for display_grade_index and sort_by_display_grade."""

    def test_ungraded_sorts_first(self) -> None:
        """Ungraded routes get the sentinel index."""
        assert display_grade_index(None, []) == UNGRADED_INDEX
        assert display_grade_index("V4", _ascents("V2", "V2")) == 4

    def test_sort_ascending_and_descending(self) -> None:
        """Routes sort by blended grade, ungraded first ascending."""
        routes = [
            RouteSummary(name="hard", grade_v="V6"),
            RouteSummary(name="none"),
            RouteSummary(name="soft", grade_v="V6", ascents=_ascents("V2", "V2")),
            RouteSummary(name="easy", grade_v="V0"),
        ]
        ascending = [r.name for r in sort_by_display_grade(routes)]
        assert ascending == ["none", "easy", "soft", "hard"]
        descending = [r.name for r in sort_by_display_grade(routes, descending=True)]
        assert descending == ["hard", "soft", "easy", "none"]


class TestAverageRating:
    """Tests for average_rating."""

    def test_mean_of_present_ratings(self, sample_ascents) -> None:
        """Ascents without a rating are skipped."""
        assert average_rating(sample_ascents) == pytest.approx(3.0)

    def test_no_ratings(self) -> None:
        """No ratings averages to zero."""
        assert average_rating([]) == 0.0
        assert average_rating(None) == 0.0
        assert average_rating([{"rating": None}]) == 0.0

    def test_skips_non_record_entries(self) -> None:
        """Strings and None carry no rating."""
        assert average_rating([None, "V3", {"rating": 4}]) == pytest.approx(4.0)

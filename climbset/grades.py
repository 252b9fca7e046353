"""Display-grade aggregation on the V-scale.

A route's display grade blends the setter's grade with the grades
climbers suggest when logging ascents. Grades are ordinal, so the
blend is computed on scale indices and rounded back onto the scale.

Cases:
    - no setter grade, no climber grades: ungraded (None)
    - setter grade only: the setter grade verbatim
    - climber grades only: rounded mean of climber indices
    - both: rounded ``0.5 * setter + 0.5 * mean(climbers)``

Example:
    >>> calculate_display_grade("V4", [{"grade_v": "V2"}, {"grade_v": "V2"}])
    'V3'
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Final, Optional, TypeVar, Union

from climbset.constants import V_GRADES
from climbset.models import Ascent, RouteSummary

SETTER_WEIGHT: Final[float] = 0.5
CLIMBER_WEIGHT: Final[float] = 0.5

# Sort key used for routes without a display grade
UNGRADED_INDEX: Final[int] = -1

# Bare strings are taken as the suggested grade; anything else is skipped
AscentInput = Union[Ascent, Mapping[str, Any], str, None]
RouteT = TypeVar("RouteT", bound=RouteSummary)


def grade_to_index(grade: Optional[str], scale: Sequence[str] = V_GRADES) -> Optional[int]:
    """Return the scale index of ``grade``, or None for missing/unknown grades."""
    if not grade:
        return None
    try:
        return scale.index(grade)
    except ValueError:
        return None


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def index_to_grade(value: float, scale: Sequence[str] = V_GRADES) -> Optional[str]:
    """Round ``value`` onto the scale.

    Rounding is half away from zero. Values that round outside the
    scale yield None instead of raising.
    """
    if math.isnan(value) or math.isinf(value):
        return None
    rounded = _round_half_away_from_zero(value)
    if 0 <= rounded < len(scale):
        return scale[rounded]
    return None


def _ascent_grade(ascent: AscentInput) -> Optional[str]:
    if isinstance(ascent, str):
        return ascent
    if isinstance(ascent, Ascent):
        return ascent.grade_v
    if not isinstance(ascent, Mapping):
        return None
    grade = ascent.get("grade_v")
    return grade if isinstance(grade, str) else None


def _ascent_rating(ascent: AscentInput) -> Any:
    if isinstance(ascent, Ascent):
        return ascent.rating
    if isinstance(ascent, Mapping):
        return ascent.get("rating")
    return None


def calculate_display_grade(
    setter_grade: Optional[str],
    ascents: Optional[Iterable[AscentInput]] = None,
    scale: Sequence[str] = V_GRADES,
) -> Optional[str]:
    """Blend a setter grade with climber-suggested grades.

    Ascents without a grade, or with a grade not on ``scale``, are
    excluded before averaging. The result does not depend on ascent
    order and the function never raises for bad grade values.

    Args:
        setter_grade: The setter's grade, or None.
        ascents: Ascent records (models, mappings with ``grade_v`` or
            bare grade strings). Other entries are ignored.
        scale: Ordered grade scale.

    Returns:
        The display grade, or None if the route is ungraded.
    """
    setter_index = grade_to_index(setter_grade, scale)
    climber_indices = [
        index
        for index in (grade_to_index(_ascent_grade(a), scale) for a in ascents or ())
        if index is not None
    ]

    if setter_index is None and not climber_indices:
        return None
    if setter_index is not None and not climber_indices:
        return scale[setter_index]

    climber_mean = sum(climber_indices) / len(climber_indices)
    if setter_index is None:
        return index_to_grade(climber_mean, scale)

    return index_to_grade(
        SETTER_WEIGHT * setter_index + CLIMBER_WEIGHT * climber_mean, scale
    )


def display_grade_index(
    setter_grade: Optional[str],
    ascents: Optional[Iterable[AscentInput]] = None,
    scale: Sequence[str] = V_GRADES,
) -> int:
    """Return the display grade as a sortable index (ungraded sorts first)."""
    index = grade_to_index(calculate_display_grade(setter_grade, ascents, scale), scale)
    return UNGRADED_INDEX if index is None else index


def sort_by_display_grade(
    routes: Iterable[RouteT], descending: bool = False
) -> list[RouteT]:
    """Order routes easiest-first (or hardest-first) by display grade.

    The sort is stable, so routes with equal grades keep their input order.
    """
    return sorted(
        routes,
        key=lambda route: display_grade_index(route.grade_v, route.ascents),
        reverse=descending,
    )


def average_rating(ascents: Optional[Iterable[AscentInput]]) -> float:
    """Mean star rating across ascents that carry one, or 0.0 if none do."""
    ratings: list[int] = []
    for ascent in ascents or ():
        rating = _ascent_rating(ascent)
        if isinstance(rating, int) and not isinstance(rating, bool) and rating > 0:
            ratings.append(rating)
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)

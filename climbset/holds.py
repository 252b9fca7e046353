"""Hold set operations: placement, removal, type cycling and updates.

Every function is pure: it takes a hold set and returns a new one,
returning the input object itself when the operation is a no-op. This
lets callers detect no-ops with an identity check and skip pushing an
undo snapshot.

Proximity matching uses per-axis deltas in percentage units. Removal
uses a wider tolerance than duplicate detection so that deleting a hold
is more forgiving than placing one.
"""

import uuid
from typing import Optional

from climbset.constants import (
    ADD_TOLERANCE,
    DEFAULT_HOLD_SIZE,
    HOLD_TYPE_CYCLE,
    REMOVE_MARGIN,
    HoldSize,
    HoldType,
)
from climbset.logging_config import get_logger
from climbset.models import Hold, HoldSet, HoldUpdate

logger = get_logger(__name__)


def _new_hold_id() -> str:
    return uuid.uuid4().hex


def create_hold(
    x: float,
    y: float,
    hold_type: HoldType,
    size: HoldSize = DEFAULT_HOLD_SIZE,
    sequence: Optional[int] = None,
) -> Hold:
    """Create a new hold with a freshly generated id.

    Args:
        x: Horizontal position in percent.
        y: Vertical position in percent.
        hold_type: Role of the hold.
        size: Marker size.
        sequence: Optional step number.

    Returns:
        The new Hold.

    Raises:
        pydantic.ValidationError: If coordinates fall outside 0–100.
    """
    return Hold(
        id=_new_hold_id(),
        x=x,
        y=y,
        type=hold_type,
        size=size,
        sequence=sequence,
    )


def find_nearest(
    holds: HoldSet,
    x: float,
    y: float,
    tolerance: float = ADD_TOLERANCE,
) -> Optional[Hold]:
    """Return the first hold within ``tolerance`` of a point.

    A hold matches when both its horizontal and vertical deltas are
    strictly less than ``tolerance``. The scan is linear in hold-set
    order; route hold counts are small.

    Args:
        holds: Hold set to search.
        x: Horizontal position in percent.
        y: Vertical position in percent.
        tolerance: Per-axis match distance in percent.

    Returns:
        The first matching hold, or None.
    """
    for hold in holds:
        if abs(hold.x - x) < tolerance and abs(hold.y - y) < tolerance:
            return hold
    return None


def add_hold(
    holds: HoldSet,
    x: float,
    y: float,
    hold_type: HoldType,
    size: HoldSize = DEFAULT_HOLD_SIZE,
    tolerance: float = ADD_TOLERANCE,
) -> HoldSet:
    """Append a hold unless one already exists nearby.

    Returns:
        A new hold set with the hold appended, or ``holds`` unchanged if
        an existing hold lies within ``tolerance``.
    """
    if find_nearest(holds, x, y, tolerance) is not None:
        logger.debug("Hold already present near (%.2f, %.2f)", x, y)
        return holds

    return holds + (create_hold(x, y, hold_type, size),)


def remove_hold(
    holds: HoldSet,
    x: float,
    y: float,
    tolerance: float = ADD_TOLERANCE + REMOVE_MARGIN,
) -> HoldSet:
    """Remove the hold nearest a point, using the wider removal tolerance.

    Returns:
        A new hold set without the matched hold, or ``holds`` unchanged
        if nothing is close enough.
    """
    target = find_nearest(holds, x, y, tolerance)
    if target is None:
        return holds

    return tuple(hold for hold in holds if hold.id != target.id)


def next_hold_type(current: HoldType) -> HoldType:
    """Return the type following ``current`` in the tap cycle."""
    index = HOLD_TYPE_CYCLE.index(current)
    return HOLD_TYPE_CYCLE[(index + 1) % len(HOLD_TYPE_CYCLE)]


def _find_by_id(holds: HoldSet, hold_id: str) -> Optional[int]:
    for index, hold in enumerate(holds):
        if hold.id == hold_id:
            return index
    return None


def _replace_at(holds: HoldSet, index: int, hold: Hold) -> HoldSet:
    return holds[:index] + (hold,) + holds[index + 1 :]


def cycle_type(holds: HoldSet, hold_id: str) -> HoldSet:
    """Advance a hold's type to the next one in the cycle.

    Position, size and sequence are preserved; colour follows the new
    type. Unknown ids are ignored.

    Returns:
        A new hold set, or ``holds`` unchanged if ``hold_id`` is unknown.
    """
    index = _find_by_id(holds, hold_id)
    if index is None:
        logger.debug("Ignoring type cycle for unknown hold %s", hold_id)
        return holds

    hold = holds[index]
    return _replace_at(holds, index, hold.replace(type=next_hold_type(hold.type)))


def update_hold(holds: HoldSet, hold_id: str, update: HoldUpdate) -> HoldSet:
    """Apply a tagged update (resize, annotate, reposition) to one hold.

    Type and colour are never changed here; use :func:`cycle_type`.

    Returns:
        A new hold set, or ``holds`` unchanged if ``hold_id`` is unknown
        or the update leaves the hold as it was.
    """
    index = _find_by_id(holds, hold_id)
    if index is None:
        logger.debug("Ignoring %s update for unknown hold %s", update.kind, hold_id)
        return holds

    updated = holds[index].replace(**update.changes())
    if updated == holds[index]:
        return holds
    return _replace_at(holds, index, updated)


def handle_tap(
    holds: HoldSet,
    x: float,
    y: float,
    default_type: HoldType,
    default_size: HoldSize = DEFAULT_HOLD_SIZE,
    tolerance: float = ADD_TOLERANCE,
) -> HoldSet:
    """Single-gesture editing: cycle a nearby hold or place a new one.

    Returns:
        The hold set with the nearby hold's type cycled, or with a new
        hold of ``default_type``/``default_size`` appended.
    """
    existing = find_nearest(holds, x, y, tolerance)
    if existing is not None:
        return cycle_type(holds, existing.id)

    return add_hold(holds, x, y, default_type, default_size, tolerance)


def clear_holds() -> HoldSet:
    """Return an empty hold set."""
    return ()

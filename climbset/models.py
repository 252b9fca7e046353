"""Data models for holds, ascents and route hand-off payloads.

Hold coordinates are percentages (0–100) of the wall image width and
height rather than pixels, which keeps a hold set valid for any
rendered resolution of the same photo.

Example:
    >>> hold = Hold(id="h1", x=50.0, y=20.0, type="start")
    >>> hold.color
    '#10b981'
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field

from climbset.constants import HOLD_COLORS, HoldSize, HoldType

# ---------------------------------------------------------------------------
# Holds
# ---------------------------------------------------------------------------


class Hold(BaseModel):
    """A single hold marker placed on a wall image.

    Holds are immutable; every edit produces a new instance. ``color`` is
    derived from ``type`` and cannot be set independently.

    Attributes:
        id: Opaque identifier, stable for the hold's lifetime.
        x: Horizontal position as a percentage of image width (0–100).
        y: Vertical position as a percentage of image height (0–100).
        type: Role of the hold in the route.
        size: Rendered marker size; no behavioural effect.
        sequence: Step number shown when sequencing is enabled, or None.
        notes: Optional free-text note attached to the hold.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    x: float = Field(ge=0.0, le=100.0)
    y: float = Field(ge=0.0, le=100.0)
    type: HoldType
    size: HoldSize = "medium"
    sequence: int | None = Field(default=None, ge=0)
    notes: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def color(self) -> str:
        """Hex colour for the hold's type."""
        return HOLD_COLORS[self.type]

    def replace(self, **changes: Any) -> "Hold":
        """Return a validated copy of this hold with ``changes`` applied.

        Args:
            **changes: Field values to override.

        Returns:
            A new Hold instance.
        """
        data = self.model_dump(exclude={"color"})
        data.update(changes)
        return Hold.model_validate(data)


# Ordered hold collection; insertion order is display and sequence order
HoldSet = tuple[Hold, ...]

_HOLD_LIST_ADAPTER: TypeAdapter[list[Hold]] = TypeAdapter(list[Hold])


def holds_to_json(holds: HoldSet) -> str:
    """Serialize a hold set to a JSON array string."""
    return _HOLD_LIST_ADAPTER.dump_json(list(holds)).decode("utf-8")


def holds_from_json(raw: str | bytes) -> HoldSet:
    """Parse a JSON array string into a hold set.

    Raises:
        pydantic.ValidationError: If the payload is not a valid hold list.
    """
    return tuple(_HOLD_LIST_ADAPTER.validate_json(raw))


# ---------------------------------------------------------------------------
# Tagged hold updates
# ---------------------------------------------------------------------------


class Resize(BaseModel):
    """Change a hold's marker size."""

    kind: Literal["resize"] = "resize"
    size: HoldSize

    def changes(self) -> dict[str, Any]:
        return {"size": self.size}


class Annotate(BaseModel):
    """Set or clear a hold's notes."""

    kind: Literal["annotate"] = "annotate"
    notes: str | None = None

    def changes(self) -> dict[str, Any]:
        return {"notes": self.notes}


class Reposition(BaseModel):
    """Move a hold to new percentage coordinates."""

    kind: Literal["reposition"] = "reposition"
    x: float = Field(ge=0.0, le=100.0)
    y: float = Field(ge=0.0, le=100.0)

    def changes(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


HoldUpdate = Annotated[Union[Resize, Annotate, Reposition], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Ascents and routes
# ---------------------------------------------------------------------------


class Ascent(BaseModel):
    """A climber's logged send of a route.

    Owned by an external collaborator; the grade aggregator only reads
    ``grade_v`` and ``rating``.

    Attributes:
        id: Ascent identifier.
        route_id: Identifier of the climbed route.
        user_id: Identifier of the climber.
        grade_v: The climber's suggested V-grade, if any.
        rating: The climber's star rating (1–5), if any.
        flashed: True if the route was sent on the first attempt.
        notes: Optional free-text notes.
    """

    id: str | None = None
    route_id: str | None = None
    user_id: str | None = None
    grade_v: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    flashed: bool = False
    notes: str | None = None


class RouteSummary(BaseModel):
    """Minimal route view used for display-grade ordering.

    Attributes:
        name: Route name.
        grade_v: Setter-chosen V-grade, if any.
        ascents: Logged ascents of the route.
    """

    name: str
    grade_v: str | None = None
    ascents: list[Ascent] = Field(default_factory=list)


class RoutePayload(BaseModel):
    """Finished route handed to the route-save collaborator.

    Attributes:
        name: Route name.
        grade_v: Setter-chosen V-grade, if any.
        holds: The finished hold set.
    """

    name: str = Field(min_length=1)
    grade_v: str | None = None
    holds: list[Hold]

"""Hold editing engine for climbing-wall route setting.

Modules:
    coordinates: pixel <-> wall-percentage conversion
    holds: hold placement, removal, type cycling and updates
    history: linear undo/redo over hold-set snapshots
    sequence: per-hold step numbering
    grades: display-grade aggregation on the V-scale
    drafts: durable storage for the in-progress hold set
    editor: one editing session wiring the above together
"""

from climbset.coordinates import Point, to_percentage, to_pixels
from climbset.drafts import DraftStore, JsonFileDraftStore, MemoryDraftStore
from climbset.editor import HoldEditor
from climbset.exceptions import (
    ClimbsetError,
    ConfigurationError,
    CoordinateMappingError,
    DraftPersistenceError,
)
from climbset.grades import calculate_display_grade, grade_to_index, index_to_grade
from climbset.history import EditHistory
from climbset.models import (
    Annotate,
    Ascent,
    Hold,
    HoldSet,
    HoldUpdate,
    Reposition,
    Resize,
    RoutePayload,
    RouteSummary,
)

__version__ = "0.1.0"

__all__ = [
    "Annotate",
    "Ascent",
    "ClimbsetError",
    "ConfigurationError",
    "CoordinateMappingError",
    "DraftPersistenceError",
    "DraftStore",
    "EditHistory",
    "Hold",
    "HoldEditor",
    "HoldSet",
    "HoldUpdate",
    "JsonFileDraftStore",
    "MemoryDraftStore",
    "Point",
    "Reposition",
    "Resize",
    "RoutePayload",
    "RouteSummary",
    "calculate_display_grade",
    "grade_to_index",
    "index_to_grade",
    "to_percentage",
    "to_pixels",
]

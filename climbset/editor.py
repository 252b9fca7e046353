"""Hold editing session.

:class:`HoldEditor` owns one route draft: the live hold set, its undo
history and the draft slot it writes through to. Pointer events flow in
as pixel or percentage coordinates, are applied with the pure functions
in :mod:`climbset.holds`, snapshot the previous state into
:class:`~climbset.history.EditHistory` when something actually changed,
and are saved to the draft store.

One editor exists per editing session; it is constructed and discarded
by the caller and is not shared between threads.

Example:
    >>> editor = HoldEditor(MemoryDraftStore())
    >>> editor.add_hold(40.0, 60.0)
    True
    >>> editor.handle_tap(40.5, 60.5)   # cycles hand -> foot
    True
    >>> editor.holds[0].type
    'foot'
    >>> editor.undo()
    True
    >>> editor.holds[0].type
    'hand'
"""

from __future__ import annotations

from typing import Callable, Optional

from climbset.config import get_config_value, get_draft_directory
from climbset.constants import (
    ADD_TOLERANCE,
    DEFAULT_HOLD_SIZE,
    DEFAULT_HOLD_TYPE,
    DRAFT_KEY,
    REMOVE_MARGIN,
    HoldSize,
    HoldType,
)
from climbset.coordinates import clamp_percentage, to_percentage
from climbset.drafts import DraftStore, JsonFileDraftStore
from climbset.exceptions import DraftPersistenceError
from climbset.history import EditHistory
from climbset import holds as hold_ops
from climbset.logging_config import get_logger
from climbset.models import HoldSet, HoldUpdate, RoutePayload
from climbset.sequence import toggle_sequencing

logger = get_logger(__name__)


class HoldEditor:  # pylint: disable=too-many-instance-attributes
    """Editing session for a single route draft.

    Attributes:
        selected_type: Type given to newly placed holds.
        selected_size: Size given to newly placed holds.
        show_sequence: Whether step numbers are currently displayed.
        add_tolerance: Per-axis distance used to hit an existing hold.
        remove_margin: Extra distance allowed when removing a hold.
    """

    def __init__(
        self,
        draft_store: Optional[DraftStore] = None,
        initial_holds: HoldSet = (),
        add_tolerance: float = ADD_TOLERANCE,
        remove_margin: float = REMOVE_MARGIN,
        selected_type: HoldType = DEFAULT_HOLD_TYPE,
        selected_size: HoldSize = DEFAULT_HOLD_SIZE,
    ) -> None:
        """Start a session, restoring the stored draft if there is one.

        Args:
            draft_store: Where the draft is persisted. None disables
                persistence.
            initial_holds: Hold set used when no draft is stored.
            add_tolerance: Per-axis hit distance in percent.
            remove_margin: Additional removal distance in percent; must
                be positive.
            selected_type: Initial type for new holds.
            selected_size: Initial size for new holds.

        Raises:
            ValueError: If a tolerance is not positive.
        """
        if add_tolerance <= 0 or remove_margin <= 0:
            raise ValueError("add_tolerance and remove_margin must be positive")

        self.add_tolerance = add_tolerance
        self.remove_margin = remove_margin
        self.selected_type: HoldType = selected_type
        self.selected_size: HoldSize = selected_size
        self.show_sequence = False

        self._draft_store = draft_store
        self._history = EditHistory()

        restored = self._load_draft()
        self._holds: HoldSet = restored if restored is not None else tuple(initial_holds)

    @classmethod
    def from_config(cls, initial_holds: HoldSet = ()) -> "HoldEditor":
        """Build an editor from the loaded YAML configuration."""
        return cls(
            draft_store=JsonFileDraftStore(
                get_draft_directory(), get_config_value("drafts.key", DRAFT_KEY)
            ),
            initial_holds=initial_holds,
            add_tolerance=float(get_config_value("editor.add_tolerance", ADD_TOLERANCE)),
            remove_margin=float(get_config_value("editor.remove_margin", REMOVE_MARGIN)),
            selected_type=get_config_value("editor.default_hold_type", DEFAULT_HOLD_TYPE),
            selected_size=get_config_value("editor.default_hold_size", DEFAULT_HOLD_SIZE),
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def holds(self) -> HoldSet:
        return self._holds

    @property
    def history(self) -> EditHistory:
        return self._history

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def remove_tolerance(self) -> float:
        return self.add_tolerance + self.remove_margin

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load_draft(self) -> Optional[HoldSet]:
        if self._draft_store is None:
            return None
        try:
            draft = self._draft_store.load()
        except DraftPersistenceError as exc:
            logger.warning("Could not restore draft: %s", exc.message)
            return None
        if draft is not None:
            logger.info("Restored draft with %d holds", len(draft))
        return draft

    def _save_draft(self) -> None:
        if self._draft_store is None:
            return
        try:
            self._draft_store.save(self._holds)
        except DraftPersistenceError as exc:
            logger.warning("Could not save draft: %s", exc.message)

    def _set_holds(self, holds: HoldSet) -> None:
        self._holds = holds
        self._save_draft()

    def _apply(self, operation: Callable[[HoldSet], HoldSet], action: str) -> bool:
        """Run ``operation`` and record history only if it changed the set."""
        previous = self._holds
        updated = operation(previous)
        if updated is previous:
            return False

        self._history.push(previous)
        self._set_holds(updated)
        logger.debug("%s: %d -> %d holds", action, len(previous), len(updated))
        return True

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_hold(
        self,
        x: float,
        y: float,
        hold_type: Optional[HoldType] = None,
        size: Optional[HoldSize] = None,
    ) -> bool:
        """Place a hold at percentage coordinates unless one is nearby.

        Returns:
            True if a hold was added.
        """
        return self._apply(
            lambda current: hold_ops.add_hold(
                current,
                x,
                y,
                hold_type or self.selected_type,
                size or self.selected_size,
                self.add_tolerance,
            ),
            "add",
        )

    def add_hold_at_pixel(
        self,
        pixel_x: float,
        pixel_y: float,
        container_width: float,
        container_height: float,
    ) -> bool:
        """Place a hold at a pointer position on the rendered wall.

        Positions past the container edge are pinned to the nearest edge.
        """
        point = clamp_percentage(
            to_percentage(pixel_x, pixel_y, container_width, container_height)
        )
        return self.add_hold(point.x, point.y)

    def remove_hold(self, x: float, y: float) -> bool:
        """Remove the hold nearest a point, within the removal tolerance.

        Returns:
            True if a hold was removed.
        """
        return self._apply(
            lambda current: hold_ops.remove_hold(current, x, y, self.remove_tolerance),
            "remove",
        )

    def handle_tap(self, x: float, y: float) -> bool:
        """Cycle the type of a tapped hold, or place a new one.

        Returns:
            True if the hold set changed.
        """
        return self._apply(
            lambda current: hold_ops.handle_tap(
                current,
                x,
                y,
                self.selected_type,
                self.selected_size,
                self.add_tolerance,
            ),
            "tap",
        )

    def handle_tap_at_pixel(
        self,
        pixel_x: float,
        pixel_y: float,
        container_width: float,
        container_height: float,
    ) -> bool:
        """Pixel-space variant of :meth:`handle_tap`, pinned to the wall."""
        point = clamp_percentage(
            to_percentage(pixel_x, pixel_y, container_width, container_height)
        )
        return self.handle_tap(point.x, point.y)

    def cycle_type(self, hold_id: str) -> bool:
        """Advance the type of the hold with ``hold_id``."""
        return self._apply(
            lambda current: hold_ops.cycle_type(current, hold_id), "cycle"
        )

    def update_hold(self, hold_id: str, update: HoldUpdate) -> bool:
        """Apply a resize, annotate or reposition update to one hold."""
        return self._apply(
            lambda current: hold_ops.update_hold(current, hold_id, update),
            update.kind,
        )

    def clear_holds(self) -> bool:
        """Remove every hold; a no-op on an empty set."""
        if not self._holds:
            return False
        return self._apply(lambda current: hold_ops.clear_holds(), "clear")

    def toggle_sequence_visibility(self, enable: bool) -> None:
        """Show or hide step numbers, numbering holds in set order.

        Sequencing is a display toggle and does not create an undo step.
        """
        self.show_sequence = enable
        self._set_holds(toggle_sequencing(self._holds, enable))

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def set_all_holds(self, holds: HoldSet) -> None:
        """Load a different hold set, e.g. an existing route to edit.

        History from the previous hold set is discarded.
        """
        self._history.reset()
        self._set_holds(tuple(holds))

    def clear_draft(self) -> None:
        """Discard the draft: empty the store, the hold set and history."""
        if self._draft_store is not None:
            try:
                self._draft_store.clear()
            except DraftPersistenceError as exc:
                logger.warning("Could not clear draft: %s", exc.message)
        self._holds = ()
        self._history.reset()

    def undo(self) -> bool:
        """Step back one edit; False at the start of history."""
        restored = self._history.undo(self._holds)
        if restored is None:
            return False
        self._set_holds(restored)
        return True

    def redo(self) -> bool:
        """Re-apply the last undone edit; False if there is none."""
        restored = self._history.redo(self._holds)
        if restored is None:
            return False
        self._set_holds(restored)
        return True

    def route_payload(self, name: str, grade_v: Optional[str] = None) -> RoutePayload:
        """Package the current holds for the route-save collaborator."""
        return RoutePayload(name=name, grade_v=grade_v, holds=list(self._holds))

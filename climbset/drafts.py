"""Durable storage for the in-progress hold set.

There is a single well-known draft slot: one outstanding draft at a
time, not one per route. Backends implement the :class:`DraftStore`
protocol; :class:`JsonFileDraftStore` keeps the slot as a JSON file on
disk and :class:`MemoryDraftStore` keeps it in process.

Unreadable draft contents (corrupt JSON, a non-list payload, invalid
holds) load as "no draft" rather than failing. I/O errors are raised as
:class:`DraftPersistenceError` so the editor can log and carry on.
"""

import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from pydantic import ValidationError

from climbset.constants import DRAFT_KEY
from climbset.exceptions import DraftPersistenceError
from climbset.logging_config import get_logger
from climbset.models import HoldSet, holds_from_json, holds_to_json

logger = get_logger(__name__)


@runtime_checkable
class DraftStore(Protocol):
    """Key/value slot holding the current draft hold set."""

    def load(self) -> Optional[HoldSet]:
        """Return the stored draft, or None if there is none."""

    def save(self, holds: HoldSet) -> None:
        """Replace the stored draft with ``holds``."""

    def clear(self) -> None:
        """Delete the stored draft."""


@contextmanager
def _draft_op(context: str) -> Generator[None, None, None]:
    """Wrap filesystem operations with consistent error handling.

    Args:
        context: Description of the operation for error messages.

    Raises:
        DraftPersistenceError: If the wrapped block raises OSError.
    """
    try:
        yield
    except OSError as e:
        raise DraftPersistenceError(f"{context}: {e!s}") from e


class JsonFileDraftStore:
    """Draft slot stored as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved
    into place, so a crash never leaves a half-written draft.

    Example:
        >>> store = JsonFileDraftStore("data/drafts")
        >>> store.save(holds)
        >>> store.load() == holds
        True
    """

    def __init__(self, directory: Path | str, key: str = DRAFT_KEY) -> None:
        """Initialize the store.

        Args:
            directory: Directory holding draft files. Created on first save.
            key: Name of the draft slot.
        """
        if not key or Path(key).name != key:
            raise ValueError(f"Invalid draft key: {key!r}")
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> Optional[HoldSet]:
        if not self.path.exists():
            return None

        with _draft_op(f"Failed to read draft {self.path}"):
            raw = self.path.read_bytes()

        try:
            return holds_from_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable draft %s: %s", self.path, e)
            return None

    def save(self, holds: HoldSet) -> None:
        payload = holds_to_json(holds)
        with _draft_op(f"Failed to write draft {self.path}"):
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{self.key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        logger.debug("Saved draft with %d holds to %s", len(holds), self.path)

    def clear(self) -> None:
        with _draft_op(f"Failed to delete draft {self.path}"):
            self.path.unlink(missing_ok=True)


class MemoryDraftStore:
    """In-process draft slot, for tests and headless sessions."""

    def __init__(self, holds: Optional[HoldSet] = None) -> None:
        self._holds = holds

    def load(self) -> Optional[HoldSet]:
        return self._holds

    def save(self, holds: HoldSet) -> None:
        self._holds = tuple(holds)

    def clear(self) -> None:
        self._holds = None

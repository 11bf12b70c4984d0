"""
Runtime-mutable mapping tables (user corrections and custom mappings).

Stores are copy-on-write: each mutation builds a fresh read-only mapping
under a lock and swaps it in. ``snapshot()`` hands out the current mapping,
which never changes afterwards, so a conversion pass reads one consistent
table even while another request is updating the store.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from app.core.exceptions import InitializationError, InvalidInputError, PersistenceError

logger = logging.getLogger(__name__)


def validate_pairs(pairs: Mapping) -> Dict[str, str]:
    """Check every key and value is a string."""
    if not isinstance(pairs, Mapping):
        raise InvalidInputError("Mappings must be an object with from-to word pairs")
    for key, value in pairs.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidInputError(
                "All mapping keys and values must be strings",
                details={"key": str(key)},
            )
    return dict(pairs)


class InMemoryMappingStore:
    """Mapping table that lives only for the lifetime of the process."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._lock = threading.Lock()
        self._table: Mapping[str, str] = MappingProxyType(
            validate_pairs(initial) if initial else {}
        )

    def snapshot(self) -> Mapping[str, str]:
        return self._table

    def as_dict(self) -> Dict[str, str]:
        return dict(self._table)

    def _swap(self, table: Dict[str, str]) -> None:
        self._table = MappingProxyType(table)

    def add(self, pairs: Mapping[str, str]) -> Mapping[str, str]:
        pairs = validate_pairs(pairs)
        with self._lock:
            updated = dict(self._table)
            updated.update(pairs)
            self._swap(updated)
            self._after_update(updated)
        return self._table

    def remove(self, key: str) -> bool:
        with self._lock:
            if key not in self._table:
                return False
            updated = dict(self._table)
            del updated[key]
            self._swap(updated)
            self._after_update(updated)
        return True

    def clear(self) -> None:
        with self._lock:
            self._swap({})
            self._after_update({})

    def _after_update(self, table: Dict[str, str]) -> None:
        """Hook run under the lock once the new table is visible."""
        pass

    def __len__(self) -> int:
        return len(self._table)


class JsonFileMappingStore(InMemoryMappingStore):
    """
    Mapping table persisted to a JSON file after every update.

    A failed write raises ``PersistenceError``; the in-memory table keeps the
    update, so conversions use it until the process restarts.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)

    def load(self) -> None:
        """Read the persisted table; a missing file means an empty table."""
        if not self.path.exists():
            logger.info(f"No corrections file at {self.path}, starting empty")
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            pairs = validate_pairs(data)
        except (OSError, ValueError, InvalidInputError) as e:
            raise InitializationError(
                f"Failed to load corrections from {self.path}",
                details={"path": str(self.path), "reason": str(e)},
            ) from e
        with self._lock:
            self._swap(pairs)
        logger.info(f"Loaded {len(pairs)} corrections from {self.path}")

    def _after_update(self, table: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(table, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(
                f"Failed to persist corrections to {self.path}: {e}",
                extra={"path": str(self.path)},
            )
            raise PersistenceError(
                str(self.path),
                details={"path": str(self.path), "reason": str(e), "corrections": dict(table)},
            ) from e

"""Stream metadata store clients.

The store holds the current cube assignments keyed by cube name. Callers only
ever list everything or upsert one assignment; conflict resolution on upsert
is the store's business.

- ``JsonFileMetadataStore``: a JSON document ``{"assignments": {cube: {...}}}``
- ``InMemoryMetadataStore``: dict-backed, nothing leaves the process
- ``create_store``: picks one from ``BackupConfig``
"""
from __future__ import annotations

import json, logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union

from pydantic import ValidationError

from config.config_manager import BackupConfig
from models.assignment import Assignment
from services.errors import StoreRejected, StoreUnavailable

log = logging.getLogger(__name__)


class MetadataStoreClient(Protocol):
    def list_assignments(self) -> List[Assignment]:
        ...

    def save_assignment(self, assignment: Assignment) -> None:
        ...


def _validated(assignment: Union[Assignment, Dict[str, Any]]) -> Assignment:
    """Re-run validation so models built with ``model_construct`` can't slip through."""
    raw = assignment.model_dump(mode="json") if isinstance(assignment, Assignment) else assignment
    try:
        return Assignment.model_validate(raw)
    except ValidationError as e:
        raise StoreRejected(f"assignment rejected by store: {e}") from e


class JsonFileMetadataStore:
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    # ----------------- internal IO -----------------
    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {"assignments": {}}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreUnavailable(f"cannot read metadata store at {self.path}: {e}", path=str(self.path)) from e
        if not isinstance(raw, dict) or not isinstance(raw.get("assignments", {}), dict):
            raise StoreUnavailable(f"unsupported metadata store layout at {self.path}", path=str(self.path))
        raw.setdefault("assignments", {})
        return raw

    def _write(self, data: Dict[str, Any]) -> None:
        if not self.path.parent.is_dir():
            raise StoreUnavailable(f"metadata store directory missing: {self.path.parent}", path=str(self.path))
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
            tmp.replace(self.path)
        except OSError as e:
            raise StoreUnavailable(f"cannot write metadata store at {self.path}: {e}", path=str(self.path)) from e

    # ----------------- client API ------------------
    def list_assignments(self) -> List[Assignment]:
        entries = self._read()["assignments"]
        out: List[Assignment] = []
        for cube in sorted(entries):
            try:
                out.append(Assignment.model_validate(entries[cube]))
            except ValidationError as e:
                raise StoreUnavailable(f"corrupt assignment {cube!r} in {self.path}: {e}", path=str(self.path)) from e
        log.debug("store list_assignments() -> %d (db=%s)", len(out), self.path)
        return out

    def save_assignment(self, assignment: Assignment) -> None:
        checked = _validated(assignment)
        data = self._read()
        existed = checked.cube_name in data["assignments"]
        data["assignments"][checked.cube_name] = checked.model_dump(mode="json")
        self._write(data)
        log.info("store save_assignment(%s) ok (%s, db=%s)",
                 checked.cube_name, "overwritten" if existed else "created", self.path)


class InMemoryMetadataStore:
    def __init__(self, assignments: Optional[Iterable[Assignment]] = None) -> None:
        self._items: Dict[str, Assignment] = {}
        for a in assignments or []:
            self._items[a.cube_name] = a.model_copy(deep=True)

    def list_assignments(self) -> List[Assignment]:
        return [self._items[k].model_copy(deep=True) for k in sorted(self._items)]

    def save_assignment(self, assignment: Assignment) -> None:
        checked = _validated(assignment)
        self._items[checked.cube_name] = checked


def create_store(config: BackupConfig) -> MetadataStoreClient:
    kind = (config.store or "file").strip().lower()
    if kind == "file":
        log.info("Using file metadata store at %s", config.store_path)
        return JsonFileMetadataStore(config.store_path)
    if kind == "memory":
        log.warning("Using in-memory metadata store; restored assignments are not persisted.")
        return InMemoryMetadataStore()
    raise ValueError(f"unknown metadata store type: {config.store!r} (expected 'file' or 'memory')")

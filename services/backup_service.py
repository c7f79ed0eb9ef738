"""Backup and restore of cube assignments.

backup:  store.list_assignments() -> <dest>/cubeAssignment/<cube>.json, one file each
restore: <dir>/<cube>.json -> store.save_assignment()

Both flows are single pass and fail fast. A backup that dies half way leaves
the files it already wrote; the timestamped directory is disposable.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from data import assignment_codec
from data.metadata_store import MetadataStoreClient
from models.assignment import Assignment, check_cube_name
from services.errors import IOFailure

log = logging.getLogger(__name__)

ASSIGNMENT_DIR = "cubeAssignment"


def assignment_file(directory: Union[str, Path], cube_name: str) -> Path:
    try:
        check_cube_name(cube_name)
    except ValueError as e:
        raise IOFailure(str(e), path=str(directory)) from e
    return Path(directory) / f"{cube_name}.json"


class BackupRestoreService:
    def __init__(self, store: MetadataStoreClient) -> None:
        self.store = store

    def backup(self, destination_root: Union[str, Path]) -> int:
        """Write every assignment in the store below ``destination_root``. Returns the file count."""
        assignments = self.store.list_assignments()
        target_dir = Path(destination_root) / ASSIGNMENT_DIR
        log.info("Found %d assignments.", len(assignments))
        for a in assignments:
            written = assignment_codec.dump(a, assignment_file(target_dir, a.cube_name))
            log.info("Saved assignment %s to %s", a.cube_name, written.resolve())
        return len(assignments)

    def restore(self, source_dir: Union[str, Path], cube_name: str) -> Optional[Assignment]:
        """Load ``<source_dir>/<cube_name>.json`` into the store.

        A missing file is logged and ``None`` returned without touching the
        store; every other failure propagates.
        """
        path = assignment_file(source_dir, cube_name)
        if not path.exists():
            log.error("%s not found.", path)
            return None
        assignment = assignment_codec.load(path)
        if assignment.cube_name != cube_name:
            log.warning("File %s holds assignment for cube %s", path, assignment.cube_name)
        log.info("Found and save: %s", assignment.cube_name)
        self.store.save_assignment(assignment)
        return assignment

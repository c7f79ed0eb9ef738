from __future__ import annotations
from datetime import datetime
from typing import Optional

BACKUP_ROOT = "stream_metadata"


def format_stamp(now: datetime, include_seconds: bool = True) -> str:
    stamp = f"{now.year:04d}-{now.month:02d}-{now.day:02d}_{now.hour:02d}-{now.minute:02d}"
    if include_seconds:
        stamp += f"-{now.second:02d}"
    return stamp


def new_backup_path(now: Optional[datetime] = None, root: str = BACKUP_ROOT, include_seconds: bool = True) -> str:
    """``<root>/YYYY-MM-DD_HH-MM-SS`` for local time ``now``; one call per backup run."""
    now = now or datetime.now()
    return f"{root.rstrip('/')}/{format_stamp(now, include_seconds)}"

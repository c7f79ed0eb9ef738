import os
from dataclasses import dataclass, field

DEFAULT_STORE_PATH = "data/stream_metadata_store.json"
DEFAULT_BACKUP_ROOT = "stream_metadata"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class BackupConfig:
    store: str = field(default_factory=lambda: os.getenv("STREAM_METADATA_STORE", "file"))
    store_path: str = field(default_factory=lambda: os.getenv("STREAM_METADATA_STORE_PATH", DEFAULT_STORE_PATH))
    backup_root: str = field(default_factory=lambda: os.getenv("BACKUP_ROOT", DEFAULT_BACKUP_ROOT))
    include_seconds: bool = field(default_factory=lambda: _env_flag("BACKUP_INCLUDE_SECONDS", True))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

import logging, os
from pathlib import Path
from typing import List, Optional, Sequence
from dotenv import load_dotenv

log = logging.getLogger(__name__)

def load_config(env_path: str | None = None) -> Optional[Path]:
    """Load ``.env`` (or ``env_path``) without overriding variables already set.

    Returns the file that was loaded, or None when running on defaults.
    """
    env_file = Path(env_path or os.getenv("STREAM_METADATA_ENV", ".env"))
    if not env_file.is_file():
        log.warning("%s not found - using environment/defaults (see .env.template).", env_file)
        return None
    load_dotenv(dotenv_path=env_file, override=False)
    log.info("Configuration loaded from %s.", env_file)
    return env_file

def filter_system_args(args: Sequence[str]) -> List[str]:
    """Drop ``-DKEY=VALUE`` arguments, exporting each one to the environment."""
    rest: List[str] = []
    for a in args:
        if a.startswith("-D") and len(a) > 2:
            key, _, value = a[2:].partition("=")
            if key:
                os.environ[key] = value
                continue
        rest.append(a)
    return rest

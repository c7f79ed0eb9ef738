import argparse, logging, sys
from typing import List, Optional

from config.config_loader import filter_system_args, load_config
from config.config_manager import BackupConfig
from data.metadata_store import create_store
from services.backup_paths import new_backup_path
from services.backup_service import BackupRestoreService
from services.errors import BackupRestoreError

log = logging.getLogger("stream_metadata_backup")

BACKUP = "backup_assignment"
RESTORE = "restore_assignment"
USAGE = (
    f"Usage: stream-metadata-backup {BACKUP}\n"
    f"Usage: stream-metadata-backup {RESTORE} /path/to/backup cube"
)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="stream-metadata-backup",
        description="Back up and restore stream cube assignments.",
        usage=USAGE,
        add_help=False,
    )
    ap.add_argument("operation", nargs="?", help=f"{BACKUP} | {RESTORE}")
    ap.add_argument("params", nargs="*", help="restore: <path> <cube>")
    return ap


def run(operation: str, params: List[str], cfg: BackupConfig) -> int:
    """Exit code for one operation. A missing restore file is non-fatal for the
    service but still exits 2 here so scripts notice nothing was restored."""
    service = BackupRestoreService(create_store(cfg))
    if operation == BACKUP:
        path = new_backup_path(root=cfg.backup_root, include_seconds=cfg.include_seconds)
        count = service.backup(path)
        log.info("Backed up %d assignments to %s", count, path)
        return 0
    restored = service.restore(params[0], params[1])
    return 0 if restored is not None else 2


def main(argv: Optional[List[str]] = None) -> int:
    args_in = filter_system_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    load_config()
    cfg = BackupConfig()
    logging.getLogger().setLevel(getattr(logging, cfg.log_level.upper(), logging.INFO))

    args = build_argparser().parse_args(args_in)
    if not args.operation:
        print(USAGE)
        return 0
    if args.operation not in (BACKUP, RESTORE):
        print("Error: please use correct options.", file=sys.stderr)
        return 1
    if args.operation == RESTORE and len(args.params) < 2:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        code = run(args.operation, args.params, cfg)
    except BackupRestoreError as e:
        log.error("%s failed (%s): %s", args.operation, e.kind.value, e)
        return 2
    except ValueError as e:
        log.error("%s", e)
        return 1
    if code == 0:
        print(f"Completed {args.operation} !")
    return code


if __name__ == "__main__":
    raise SystemExit(main())

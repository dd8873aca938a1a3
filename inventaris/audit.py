"""Append-only audit log of user actions."""

from __future__ import annotations

import sys
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import Optional, Union

AUDIT_FILE = "audit.log"

PathArg = Union[str, "PathLike[str]"]


def _timestamp() -> str:
    now = datetime.now().astimezone()
    offset = now.strftime("%z")
    return f"{now:%Y-%m-%d %H:%M:%S.%f} {offset[:3]}:{offset[3:]}"


def add_log(username: str, action: str, path: PathArg = AUDIT_FILE) -> None:
    """Append one line recording that ``username`` performed ``action``."""
    entry = f"{_timestamp()} - {username} melakukan: {action}\n"
    with open(path, "a", encoding="utf-8") as log:
        try:
            log.write(entry)
        except OSError as exc:
            print(f"Gagal menulis log: {exc}", file=sys.stderr)


def read_logs(path: PathArg = AUDIT_FILE) -> Optional[str]:
    """Return the whole log, or None when it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        return None


def show_audit_logs(path: PathArg = AUDIT_FILE) -> None:
    """Print the log and wait for Enter."""
    logs = read_logs(path)
    if logs is None:
        print("Tidak ada log yang ditemukan.")
    else:
        print(logs)
    print("\nTekan Enter untuk kembali...")
    try:
        input()
    except EOFError:
        pass
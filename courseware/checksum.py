"""Checksum utilities to keep page writes idempotent."""

from __future__ import annotations

import hashlib
from pathlib import Path

from .errors import FilesystemError


def sha256_bytes(data: bytes) -> str:
    digest = hashlib.sha256()
    digest.update(data)
    return digest.hexdigest()


def sha256_file(path: Path) -> str | None:
    if not path.is_file():
        return None
    digest = hashlib.sha256()
    try:
        with path.open("rb") as handle:
            for chunk in iter(lambda: handle.read(65536), b""):
                digest.update(chunk)
    except OSError as exc:
        raise FilesystemError("read", path, str(exc)) from exc
    return digest.hexdigest()


def write_text_if_changed(path: Path, text: str) -> bool:
    """Write ``text`` as UTF-8 unless ``path`` already holds those bytes.

    Returns True when the file was (re)written.
    """
    data = text.encode("utf-8")
    if sha256_file(path) == sha256_bytes(data):
        return False
    try:
        with path.open("wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise FilesystemError("write", path, str(exc)) from exc
    return True

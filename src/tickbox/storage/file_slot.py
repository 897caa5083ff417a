# storage/file_slot.py

from __future__ import annotations

import base64
import contextlib
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9_.-]*")
_ENCODED_PREFIX = "~"


class JsonFileSlot:
    """
    Key-value slots stored as one file per key under a directory.

    Writes go to a temp file first and are moved into place with os.replace,
    so a crash mid-write leaves the previous value intact.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileSlot ready dir=%s", self._root)

    def _path_for(self, key: str) -> Path:
        """
        Map a key to its file.

        Plain keys keep their name; anything else is urlsafe-base64 encoded
        behind a "~" prefix, which plain names cannot start with, so distinct
        keys never share a file.
        """
        if _SAFE_KEY.fullmatch(key):
            return self._root / f"{key}.json"
        encoded = base64.urlsafe_b64encode(key.encode("utf-8")).decode("ascii").rstrip("=")
        return self._root / f"{_ENCODED_PREFIX}{encoded}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, "utf-8")
        os.replace(tmp_path, path)

        # Best-effort: keep it private
        with contextlib.suppress(OSError):
            os.chmod(path, 0o600)

    def remove(self, key: str) -> None:
        with contextlib.suppress(FileNotFoundError):
            self._path_for(key).unlink()

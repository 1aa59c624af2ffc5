"""Environment utilities for resolving Docker secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def _read_secret(key: str, file_path: str) -> Optional[str]:
    try:
        return Path(file_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        logger.warning(
            "env.secret_file.missing",
            extra={"key": key, "path": file_path, "error": str(exc)},
        )
    except (UnicodeDecodeError, OSError) as exc:
        logger.warning(
            "env.secret_file.load_failed",
            extra={"key": key, "path": file_path, "error": str(exc)},
        )
    return None


def load_secret_file_variables() -> None:
    """
    Expose ``KEY_FILE`` secrets as ``KEY`` environment variables.

    Used for ``SUPABASE_API_KEY_FILE`` and similar mounts. A variable that is
    already set wins over its file; unreadable files are logged and skipped.
    """
    for key, file_path in list(os.environ.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue
        value = _read_secret(key, file_path)
        if value is not None:
            os.environ[target_key] = value


load_secret_file_variables()

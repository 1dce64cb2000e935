"""Environment helpers for Docker-style secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def _read_secret(key: str, file_path: str) -> Optional[str]:
    try:
        return Path(file_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        reason = "missing"
        error = exc
    except UnicodeDecodeError as exc:
        reason = "decode_failed"
        error = exc
    except OSError as exc:
        reason = "load_failed"
        error = exc

    logger.warning(
        f"env.secret_file.{reason}",
        extra={"key": key, "path": file_path, "error": str(error)},
    )
    return None


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> Mapping[str, str]:
    """
    Expose the contents of ``KEY_FILE`` entries as ``KEY``.

    Existing non-empty ``KEY`` values win. Unreadable files are logged and
    skipped.

    Returns:
        The variables that were resolved from files.
    """
    target = os.environ if environ is None else environ
    resolved = {}

    for key, file_path in list(target.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if target.get(target_key):
            continue
        value = _read_secret(key, file_path)
        if value is not None:
            target[target_key] = value
            resolved[target_key] = value

    return resolved


load_secret_file_variables()

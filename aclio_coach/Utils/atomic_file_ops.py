"""
Atomic writes for the on-disk storage file.

Content goes to a temporary file next to the target and is then moved over
it, so a crash mid-write leaves either the old file or the new one.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger


def atomic_write_text(file_path: Union[str, Path], content: str, encoding: str = 'utf-8') -> None:
    """
    Replace ``file_path`` with ``content`` atomically.

    Raises:
        OSError: If the temporary file cannot be written or moved into place
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent,
        prefix=f".{file_path.name}.",
        suffix=".tmp",
        text=True
    )
    try:
        with os.fdopen(fd, 'w', encoding=encoding) as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, file_path)
    except OSError as e:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        logger.error(f"Failed to atomically write to {file_path}: {e}")
        raise

    logger.debug(f"Atomically wrote {len(content)} chars to {file_path}")


def atomic_write_json(file_path: Union[str, Path], data: Any, indent: Optional[int] = 2) -> None:
    """Serialize ``data`` to JSON and write it atomically."""
    atomic_write_text(file_path, json.dumps(data, indent=indent, ensure_ascii=False))

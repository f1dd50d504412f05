from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_text(path: Path | str, text: str, encoding: str = "utf-8") -> Path:
    """Atomically write text to a path, creating parent directories.

    Writes to a temporary file in the target directory, fsyncs, then renames,
    so readers never observe a half-written export.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix=target.name + ".", dir=str(target.parent))
    try:
        with os.fdopen(tmp_fd, "w", encoding=encoding) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target)
        return target
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)

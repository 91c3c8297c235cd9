"""Atomic file operations utilities."""

import json
import tempfile
from pathlib import Path
from typing import Any, Union

from faultline.cli.utils.json_utils import json_serializer


def atomic_write_json(filepath: Union[str, Path], data: Any, **json_kwargs) -> None:
    """
    Write JSON data to a file atomically.

    Writes to a temporary file in the target directory first, then renames
    it over the target path so readers never see a partial report.

    Args:
        filepath: Target file path
        data: Data to serialize to JSON
        **json_kwargs: Additional arguments passed to json.dump()
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    json_kwargs.setdefault("default", json_serializer)

    # Temp file in same directory to ensure same filesystem
    with tempfile.NamedTemporaryFile(
        mode='w',
        dir=filepath.parent,
        prefix=f".{filepath.name}.",
        suffix='.tmp',
        delete=False,
        encoding='utf-8'
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)
        try:
            json.dump(data, tmp_file, **json_kwargs)
            tmp_file.flush()
            tmp_file.close()

            # Atomic rename (POSIX guarantees atomicity)
            tmp_path.replace(filepath)
        except Exception:
            try:
                tmp_path.unlink()
            except OSError:
                pass
            raise

"""
JSON record file read/write under a root directory. All record I/O goes
through this layer; no direct open() elsewhere.

Reads and writes raise StoreError with a message naming the path and the
cause. Writes truncate and rewrite the target file in place; there is no
temp-file staging, so an interrupted write can leave a partial file.
"""
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from storage.errors import StoreError

logger = logging.getLogger("pair_store")


def ensure_dir(root: Path, name: str) -> Path:
    """Return root/name, creating it and missing parents. Failure is fatal, not a StoreError."""
    path = Path(root) / name
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.critical("Could not create database directory %s: %s", path, e)
        raise RuntimeError("Could not create database directory!") from e
    return path


class JSONStore:
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def dir(self, name: str) -> Path:
        return ensure_dir(self.root, name)

    def list_names(self, name: str) -> list[str]:
        """Entry names of root/name decoded as text; undecodable names are skipped."""
        path = self.dir(name)
        try:
            raw_names = os.listdir(os.fsencode(path))
        except OSError as e:
            raise StoreError(f"Could not read directory {path}: {e}") from e
        encoding = sys.getfilesystemencoding()
        names = []
        for raw in raw_names:
            try:
                names.append(raw.decode(encoding))
            except UnicodeDecodeError:
                logger.debug("Skip non-text entry %r in %s", raw, path)
        return names

    def _path(self, name: str, record_id: str) -> Path:
        """Resolve root/name/record_id. Ids are plain file names."""
        if not record_id or record_id in (".", "..") or "/" in record_id or os.sep in record_id:
            raise StoreError(f"Invalid record id: {record_id!r}")
        return self.dir(name) / record_id

    def exists(self, name: str, record_id: str) -> bool:
        return self._path(name, record_id).exists()

    def read_json(self, name: str, record_id: str) -> Any:
        """Read and decode root/name/record_id."""
        fp = self._path(name, record_id)
        try:
            with open(fp, "r", encoding="utf-8") as f:
                contents = f.read()
        except FileNotFoundError as e:
            raise StoreError(f"Record not found: {fp}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Could not read record {fp}: {e}") from e
        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise StoreError(f"Malformed record {fp}: {e}") from e
        logger.debug("Read %s", fp)
        return data

    def write_json(self, name: str, record_id: str, data: Any) -> None:
        """Encode data as JSON and overwrite root/name/record_id."""
        fp = self._path(name, record_id)
        try:
            contents = json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Could not encode record {fp}: {e}") from e
        try:
            with open(fp, "w", encoding="utf-8") as f:
                f.write(contents)
        except OSError as e:
            raise StoreError(f"Could not write record {fp}: {e}") from e
        logger.debug("Wrote %s", fp)

"""
Filesystem blob store for uploaded media.

Blobs are addressed by the path returned from ``save``; the media record
keeps that path as an opaque handle.
"""

import logging
import secrets
import time
from pathlib import Path

logger = logging.getLogger(__name__)


def generate_stored_name(original_filename: str) -> str:
    """
    Build a collision-resistant, filesystem-safe name for a new blob.

    The name is ``<epoch millis>-<random hex><extension>`` where the
    extension is taken from the original file name when it is alphanumeric.
    """
    extension = Path(original_filename or "").suffix.lower()
    if not extension[1:].isalnum():
        extension = ""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}{extension}"


class LocalBlobStore:
    """Stores blobs as plain files under a root directory."""

    def __init__(self, root: str | Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def save(self, name: str, data: bytes) -> str:
        """
        Write a blob, creating the root directory if needed.

        Returns:
            The stored path to keep on the media record.
        """
        self._root.mkdir(parents=True, exist_ok=True)
        path = self._root / name
        path.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return str(path)

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def delete(self, path: str) -> None:
        """Remove a blob. A blob that is already gone is not an error."""
        Path(path).unlink(missing_ok=True)
        logger.debug("Removed blob %s", path)

"""Blob persistence for the project collection.

Stores hold a single opaque text blob under a fixed key. The dashboard
serializes the whole collection on every change and writes it back; there
are no partial writes.
"""

from collections.abc import Sequence
import os
from pathlib import Path
import tempfile
from typing import Protocol

from pydantic import TypeAdapter
import structlog

from project_dashboard.exceptions import StoreError
from project_dashboard.models import Project

logger = structlog.get_logger(__name__)

DEFAULT_STORE_KEY = "dashboard_projects"

_PROJECT_LIST = TypeAdapter(list[Project])


def projects_to_json(projects: Sequence[Project]) -> str:
    """Pretty-printed JSON array with camelCase keys."""
    return _PROJECT_LIST.dump_json(
        list(projects), by_alias=True, exclude_none=True, indent=2
    ).decode()


def projects_from_json(blob: str | bytes) -> list[Project]:
    """Parse a JSON array of projects.

    Raises:
        pydantic.ValidationError: If the blob is not valid JSON or a record
            does not validate.
    """
    return _PROJECT_LIST.validate_json(blob)


class BlobStore(Protocol):
    def load(self) -> str | None: ...

    def save(self, blob: str) -> None: ...


class InMemoryStore:
    """Blob store backed by a dict, for tests and throwaway sessions."""

    def __init__(self, blob: str | None = None, key: str = DEFAULT_STORE_KEY):
        self.key = key
        self.blobs: dict[str, str] = {}
        if blob is not None:
            self.blobs[key] = blob

    def load(self) -> str | None:
        return self.blobs.get(self.key)

    def save(self, blob: str) -> None:
        self.blobs[self.key] = blob


class JsonFileStore:
    """Blob store writing ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Path | str, key: str = DEFAULT_STORE_KEY):
        self.data_dir = Path(data_dir).expanduser()
        self.key = key

    @property
    def path(self) -> Path:
        return self.data_dir / f"{self.key}.json"

    def load(self) -> str | None:
        """Return the stored blob, or None when nothing was saved yet."""
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e

    def save(self, blob: str) -> None:
        """Atomically replace the stored blob."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{self.key}-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(blob)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e

        logger.debug("projects_saved", path=str(self.path), size=len(blob))

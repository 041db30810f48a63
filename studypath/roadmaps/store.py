# studypath/roadmaps/store.py
"""
RoadmapStore: the saved roadmap collection.

The whole collection is one JSON array in one Slot. Every mutation re-reads
and rewrites the array; there is no locking, so two writers at once can
overwrite each other's changes.

Read failures never propagate out of list/find_by_slug/delete_by_title: the
store falls back to an empty collection and keeps a user-facing message in
``last_error``. Write failures raise StorageWriteError carrying the roadmap
that was not saved.
"""
import json
import logging
from typing import List

from pydantic import ValidationError

from studypath.roadmaps.models import Roadmap
from studypath.roadmaps.slots import Slot

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load saved roadmaps"


class StorageError(Exception):
    pass


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    def __init__(self, message: str, *, roadmap: Roadmap | None = None):
        super().__init__(message)
        self.roadmap = roadmap


class RoadmapStore:
    def __init__(self, slot: Slot):
        self.slot = slot
        self.last_error: str | None = None

    def load_records(self) -> list:
        """Return the stored JSON array as-is. Raises StorageReadError."""
        try:
            raw = self.slot.read()
        except Exception as e:
            raise StorageReadError(f"Could not read slot {self.slot.key!r}: {e}") from e

        if raw is None or not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StorageReadError(f"Slot {self.slot.key!r} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageReadError(f"Slot {self.slot.key!r} holds {type(data).__name__}, expected a list")
        return data

    def load(self) -> List[Roadmap]:
        """Return usable roadmaps in on-disk order. Raises StorageReadError."""
        roadmaps = []
        for index, item in enumerate(self.load_records()):
            if not isinstance(item, dict):
                logger.warning("Skipping stored roadmap #%d: not an object", index)
                continue
            try:
                roadmaps.append(Roadmap.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping stored roadmap #%d: %s", index, e)
        return roadmaps

    def _load_or_empty(self) -> List[Roadmap]:
        try:
            roadmaps = self.load()
        except StorageReadError as e:
            logger.error("%s: %s", LOAD_ERROR_MESSAGE, e)
            self.last_error = LOAD_ERROR_MESSAGE
            return []
        self.last_error = None
        return roadmaps

    def _persist(self, records: list, *, pending: Roadmap | None = None) -> None:
        # Records other than the one being added or removed are written back untouched
        payload = json.dumps(records)
        try:
            self.slot.write(payload)
        except Exception as e:
            raise StorageWriteError(f"Could not write slot {self.slot.key!r}: {e}", roadmap=pending) from e

    def list(self) -> List[Roadmap]:
        """Newest first; equal timestamps put the later-saved record first."""
        roadmaps = self._load_or_empty()
        order = sorted(
            range(len(roadmaps)),
            key=lambda i: (roadmaps[i].created_at, i),
            reverse=True,
        )
        return [roadmaps[i] for i in order]

    def save(self, roadmap: Roadmap) -> Roadmap:
        try:
            records = self.load_records()
        except StorageReadError as e:
            # Writing now would replace data we could not read
            raise StorageWriteError(f"Not saving, existing roadmaps unreadable: {e}", roadmap=roadmap) from e

        records.append(roadmap.to_record())
        self._persist(records, pending=roadmap)
        self.last_error = None
        logger.info("Saved roadmap %r (%d total)", roadmap.title, len(records))
        return roadmap

    def find_by_slug(self, slug: str) -> Roadmap | None:
        # Colliding slugs resolve to the first record in stored order
        for roadmap in self._load_or_empty():
            if roadmap.slug == slug:
                return roadmap
        return None

    def delete_by_title(self, title: str) -> int:
        try:
            records = self.load_records()
        except StorageReadError as e:
            logger.error("%s: %s", LOAD_ERROR_MESSAGE, e)
            self.last_error = LOAD_ERROR_MESSAGE
            return 0
        self.last_error = None

        kept = [
            item for item in records
            if not (isinstance(item, dict) and item.get("title") == title)
        ]
        removed = len(records) - len(kept)
        if removed:
            self._persist(kept)
            logger.info("Deleted %d roadmap(s) titled %r", removed, title)
        return removed

"""Outage store backed by a JSON file.

Format:
    {"outages": [{"id": 1, "title": "...", "start_time": "2026-10-17T22:00:00Z",
                  "stop_time": "2026-10-17T23:00:00Z"}, ...]}

The file is re-read on every lookup: an outage edited on disk while the
waiter sleeps must show up on the next consistency check.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from core.domain.errors import StoreError
from core.domain.language import Language
from core.domain.models import Outage, OutagesFile
from core.interfaces.outage_store import OutageStore
from core.messages import get_message

logger = logging.getLogger(__name__)


def load_outages(path: Path, language: Language = Language.ENGLISH) -> OutagesFile:
    try:
        raw = path.read_text(encoding="utf-8")
        data = json.loads(raw)
        return OutagesFile.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc).splitlines()[0]
        raise StoreError(
            get_message("error_store", language, path=path, reason=reason),
            target=str(path),
        ) from exc


class JsonOutageStore(OutageStore):
    """Read-only `OutageStore` over a JSON file."""

    def __init__(self, path: Path, language: Language = Language.ENGLISH) -> None:
        self._path = path
        self._language = language

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> list[Outage]:
        outages = load_outages(self._path, self._language).outages
        logger.debug("loaded %d outage(s) from %s", len(outages), self._path)
        return outages

    def find_by_id(self, outage_id: int) -> Outage | None:
        for outage in self.all():
            if outage.id == outage_id:
                return outage
        return None

    def find_active(self, now: datetime) -> Outage | None:
        active = [o for o in self.all() if o.is_active(now)]
        if not active:
            return None
        return min(active, key=lambda o: (o.start_time, o.id))

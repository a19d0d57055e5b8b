"""Content service - loads the event/collectible catalog and builds the event graph.

Two catalog formats are read:
- CSV (one flat row per event or collectible, the spreadsheet authors use)
- YAML (a list of mappings using the schema field names, with explicit
  ``outcomes`` lists)

Rows that are missing required fields or carry unparseable values are skipped
with a warning. Problems that span rows (duplicate ids, dangling links) are
raised as ContentError when the graph is built.
"""

import csv
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from wildtrail.config import settings
from wildtrail.core.errors import ContentError
from wildtrail.core.event_graph import EventGraph
from wildtrail.schemas.content import Choice, Collectible, EventNode, Outcome

logger = logging.getLogger(__name__)

ARTWORK_SUFFIXES = (".png", ".jpg", ".jpeg")


def _text(row: dict, column: str) -> str:
    value = row.get(column)
    return value.strip() if isinstance(value, str) else ""


def _required(row: dict, column: str) -> str:
    value = _text(row, column)
    if not value:
        raise ValueError(f"missing required column {column!r}")
    return value


def _int(row: dict, column: str, default: int | None = None) -> int | None:
    value = _text(row, column)
    return int(value) if value else default


def _probability(row: dict, n: int) -> float:
    # older catalogs name the column possibility<n>
    value = _text(row, f"probability{n}") or _text(row, f"possibility{n}")
    if not value:
        return 1.0
    probability = float(value[:-1]) / 100 if value.endswith("%") else float(value)
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability{n} must be between 0 and 1, got {value!r}")
    return probability


def _choice_from_row(row: dict, n: int) -> Choice:
    """Build choice ``n`` (1 or 2) of a CSV row.

    The authored probability is the chance of the success outcome, which carries
    the reward and the collectible. The remainder goes to an alternate outcome
    built from the ``alt_*`` columns (defaulting to the same text, no reward and
    the same next event).
    """
    result = _required(row, f"result{n}")
    probability = _probability(row, n)
    next_event_id = _int(row, f"next{n}")
    success = Outcome(
        text=result,
        weight=probability,
        reward=_int(row, f"reward{n}", 0),
        next_event_id=next_event_id,
        collectible_id=_int(row, f"collectible{n}"),
    )
    if probability >= 1.0:
        return Choice(label=_required(row, f"choice{n}"), outcomes=(success,))
    alternate = Outcome(
        text=_text(row, f"alt_result{n}") or result,
        weight=1.0 - probability,
        reward=_int(row, f"alt_reward{n}", 0),
        next_event_id=_int(row, f"alt_next{n}", next_event_id),
    )
    return Choice(label=_required(row, f"choice{n}"), outcomes=(success, alternate))


def event_from_row(row: dict) -> EventNode:
    return EventNode(
        id=_int(row, "id"),
        name=_text(row, "name"),
        text=_required(row, "content"),
        scene=_text(row, "scene") or _required(row, "sight"),
        choices=(_choice_from_row(row, 1), _choice_from_row(row, 2)),
    )


class ContentService:
    def __init__(
        self,
        content_dir: Path | None = None,
        events_file: str | None = None,
        collections_file: str | None = None,
        artwork_dir: Path | None = None,
    ):
        self.content_dir = Path(content_dir or settings.CONTENT_DIR)
        self.events_file = events_file or settings.EVENTS_FILE
        self.collections_file = collections_file or settings.COLLECTIONS_FILE
        self.artwork_dir = artwork_dir if artwork_dir is not None else settings.ARTWORK_DIR
        self._cache: dict[str, list] = {}

    def _path(self, file_name: str) -> Path:
        path = self.content_dir / file_name
        if not path.exists():
            raise ContentError(f"Content file not found: {path}")
        return path

    def _read_rows(self, path: Path) -> list[dict]:
        try:
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                if path.suffix == ".csv":
                    return list(csv.DictReader(f))
                raw = yaml.safe_load(f) or []
        except (UnicodeDecodeError, csv.Error, yaml.YAMLError) as exc:
            raise ContentError(f"Cannot read {path.name}: {exc}") from exc
        if isinstance(raw, dict):
            raw = raw.get("events") or raw.get("collections") or []
        if not isinstance(raw, list):
            raise ContentError(f"{path.name} must hold a list of entries")
        return raw

    def load_events(self) -> list[EventNode]:
        """Parse the event catalog, skipping malformed rows."""
        if "events" in self._cache:
            return self._cache["events"]

        path = self._path(self.events_file)
        from_csv = path.suffix == ".csv"
        events = []
        for line, row in enumerate(self._read_rows(path), start=2 if from_csv else 1):
            try:
                if not isinstance(row, dict):
                    raise ValueError("entry is not a mapping")
                events.append(event_from_row(row) if from_csv else EventNode.model_validate(row))
            except (ValueError, ValidationError) as exc:
                logger.warning("Skipping event entry %d in %s: %s", line, path.name, exc)

        self._cache["events"] = events
        return events

    def load_collectibles(self) -> list[Collectible]:
        """Parse the collectible catalog, skipping malformed rows."""
        if "collectibles" in self._cache:
            return self._cache["collectibles"]

        path = self._path(self.collections_file)
        collectibles = []
        for line, row in enumerate(self._read_rows(path), start=2 if path.suffix == ".csv" else 1):
            try:
                if not isinstance(row, dict):
                    raise ValueError("entry is not a mapping")
                if path.suffix == ".csv" and row.get("description") is None:
                    raise ValueError("too few fields")
                collectible_id = int(_required(row, "id")) if path.suffix == ".csv" else row["id"]
                collectibles.append(Collectible(
                    id=collectible_id,
                    name=_required(row, "name"),
                    description=_text(row, "description"),
                    image=_text(row, "image") or self.find_artwork(collectible_id),
                ))
            except (KeyError, ValueError, ValidationError) as exc:
                logger.warning("Skipping collectible entry %d in %s: %s", line, path.name, exc)

        self._cache["collectibles"] = collectibles
        return collectibles

    def find_artwork(self, collectible_id: int) -> str | None:
        """Look for ``<id>.png|jpg|jpeg`` in the artwork directory."""
        if self.artwork_dir is None:
            return None
        artwork_dir = Path(self.artwork_dir)
        for suffix in ARTWORK_SUFFIXES:
            candidate = artwork_dir / f"{collectible_id}{suffix}"
            if candidate.exists():
                return f"/collections/{candidate.name}"
        return None

    def build_graph(self, start_event_id: int | None = None) -> EventGraph:
        if start_event_id is None:
            start_event_id = settings.START_EVENT_ID
        return EventGraph(self.load_events(), self.load_collectibles(), start_event_id)


content_service = ContentService()

# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from trackline import configuration, time
from trackline.exceptions import ValidationError
from trackline.model.event import Event
from trackline.service.validate import IntervalPolicy, validate_events

logger = logging.getLogger(__name__)


class EventRepository:
    """
    Read-only event source backed by a YAML file.

    The file holds a top-level "events" list; each entry needs a name, a start
    and an end (ISO-8601, local time when no offset is given) and may carry an
    id. Entries without an id are numbered by their position in the file.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._events: Optional[list[Event]] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_EVENTS_PATH

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ValidationError(f"{self.path}: not valid YAML: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValidationError(f"{self.path}: expected a mapping with an 'events' list")

        raw_events = raw.get("events") or []
        if not isinstance(raw_events, list):
            raise ValidationError(f"{self.path}: 'events' must be a list")

        self._events = [
            self.__convert_event_for_deserialization(raw_event, position)
            for position, raw_event in enumerate(raw_events)
        ]
        logger.debug("loaded %d events from %s", len(self._events), self.path)

    def __convert_event_for_deserialization(self, raw_event: Any, position: int) -> Event:
        if not isinstance(raw_event, dict):
            raise ValidationError(f"{self.path}: event #{position + 1} is not a mapping")

        for key in ("name", "start", "end"):
            if raw_event.get(key) is None:
                raise ValidationError(
                    f"{self.path}: event #{position + 1} is missing '{key}'"
                )

        try:
            start = time.datetime_from_str(str(raw_event["start"]))
            end = time.datetime_from_str(str(raw_event["end"]))
        except ValueError as e:
            raise ValidationError(
                f"{self.path}: event #{position + 1} has an invalid date: {e}"
            ) from e

        event_id = raw_event.get("id")
        return {
            "id": str(event_id) if event_id is not None else str(position + 1),
            "name": str(raw_event["name"]),
            "start": start,
            "end": end,
        }

    def reset(self) -> None:
        self._events = None

    def get_all_events(self, policy: IntervalPolicy = "reject") -> list[Event]:
        return validate_events(self.events, policy)


EVENT_REPO = EventRepository()

# SPDX-License-Identifier: MIT

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pendulum
import pytest
from yaml import dump

from trackline import configuration
from trackline.initialize import initialize
from trackline.model.event import Event
from trackline.repository.configuration import CONFIGURATION_REPO
from trackline.repository.event import EVENT_REPO
from trackline.service.cache import LANE_CACHE, clear_page_cache


def local(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, hour, minute, tz="local")


def make_event(
    id: str, start: pendulum.DateTime, end: pendulum.DateTime, name: str | None = None
) -> Event:
    return {"id": id, "name": name if name is not None else id, "start": start, "end": end}


@pytest.fixture
def trackline_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration and data at a temporary directory and initialize them."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_PATH", data_path / "events.yaml")

    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    LANE_CACHE.clear()
    clear_page_cache()

    initialize()
    yield tmp_path

    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    LANE_CACHE.clear()
    logging.getLogger("trackline").setLevel(logging.NOTSET)


@pytest.fixture
def write_events(tmp_path: Path) -> Callable[..., Path]:
    def _write(events: list[dict[str, Any]], name: str = "events.yaml") -> Path:
        path = tmp_path / name
        path.write_text(dump({"events": events}))
        return path

    return _write

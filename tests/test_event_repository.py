# SPDX-License-Identifier: MIT

from collections.abc import Callable
from pathlib import Path

import pytest

from trackline.exceptions import ValidationError
from trackline.repository.event import EventRepository

from conftest import local


def test_loads_events(write_events: Callable[..., Path]) -> None:
    path = write_events(
        [
            {"id": "kickoff", "name": "Kickoff", "start": "2024-01-15 09:00", "end": "2024-01-15 10:00"},
            {"name": "Sprint", "start": "2024-01-15", "end": "2024-01-26"},
        ]
    )
    events = EventRepository(path).get_all_events()

    assert events[0] == {
        "id": "kickoff",
        "name": "Kickoff",
        "start": local(2024, 1, 15, 9),
        "end": local(2024, 1, 15, 10),
    }
    # entries without an id are numbered by position
    assert events[1]["id"] == "2"
    assert events[1]["start"] == local(2024, 1, 15)


def test_reads_yaml_dates(tmp_path: Path) -> None:
    path = tmp_path / "events.yaml"
    path.write_text(
        "events:\n"
        "  - id: 7\n"
        "    name: Launch\n"
        "    start: 2024-03-01\n"
        "    end: 2024-03-02T18:30:00\n"
    )
    (event,) = EventRepository(path).get_all_events()

    assert event["id"] == "7"
    assert event["start"] == local(2024, 3, 1)
    assert event["end"] == local(2024, 3, 2, 18, 30)


def test_empty_file_has_no_events(tmp_path: Path) -> None:
    path = tmp_path / "events.yaml"
    path.write_text("")
    assert EventRepository(path).get_all_events() == []


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("events: [", "not valid YAML"),
        ("- a\n- b\n", "expected a mapping"),
        ("events: {name: x}\n", "must be a list"),
        ("events:\n  - just a string\n", "is not a mapping"),
        ("events:\n  - {name: x, start: '2024-01-01'}\n", "missing 'end'"),
        ("events:\n  - {name: x, start: 'soon', end: '2024-01-01'}\n", "invalid date"),
    ],
)
def test_malformed_files_raise(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "events.yaml"
    path.write_text(content)
    with pytest.raises(ValidationError, match=message):
        EventRepository(path).get_all_events()


def test_backwards_events_follow_the_policy(write_events: Callable[..., Path]) -> None:
    path = write_events(
        [{"id": "x", "name": "Backwards", "start": "2024-01-16", "end": "2024-01-15"}]
    )
    repository = EventRepository(path)

    with pytest.raises(ValidationError):
        repository.get_all_events("reject")

    (event,) = repository.get_all_events("swap")
    assert (event["start"], event["end"]) == (local(2024, 1, 15), local(2024, 1, 16))


def test_default_path_comes_from_configuration(trackline_home: Path) -> None:
    repository = EventRepository()
    assert repository.path == trackline_home / "data" / "events.yaml"
    assert repository.get_all_events() == []

from __future__ import annotations

import pytest

from mediatel.events import Event, factory, make_event
from mediatel.events.factory import (
    CHANNEL_CREATED_COLUMNS,
    TRANSPORT_CREATED_COLUMNS,
    format_selected_pairs,
)

from fakes import FakeComponent, FakePair, FakeStream


def test_conference_created_substitutes_null_focus():
    event = factory.conference_created("conf1", None)
    assert event.name == "conference_created"
    assert event.columns == ("conference_id", "focus")
    assert event.values == ("conf1", "null")


def test_channel_created_schema_and_values():
    event = factory.channel_created("ch1", "audio", "conf1", "ep1", 5)
    assert event.name == "channel_created"
    assert event.columns == CHANNEL_CREATED_COLUMNS
    assert event.values == ("ch1", "audio", "conf1", "ep1", 5)


def test_channel_expired_shares_channel_schema():
    event = factory.channel_expired("ch1", "video", "conf1", "", -1)
    assert event.name == "channel_expired"
    assert len(event.columns) == len(event.values) == 5


def test_transport_created_renders_hash_and_role_as_strings():
    event = factory.transport_created(1234, "conf1", 2, None, False)
    assert event.columns == TRANSPORT_CREATED_COLUMNS
    assert event.values == ("1234", "conf1", 2, "null", "false")


def test_transport_state_changed_stringifies_states():
    event = factory.transport_state_changed(7, "conf1", None, "Completed")
    assert event.values == ("7", "conf1", "null", "Completed")


def test_endpoint_display_name_event_name():
    event = factory.endpoint_display_name_changed("conf1", "ep1", "Alice")
    assert event.name == "endpoint_display_name"
    assert event.columns == ("conference_id", "endpoint_id", "display_name")


def test_focus_and_room_events():
    assert factory.focus_created("room@muc").values == ("room@muc",)
    room = factory.conference_room("conf1", None)
    assert room.columns == ("conference_id", "room_jid")
    assert room.values == ("conf1", "null")


@pytest.mark.parametrize(
    "build",
    [
        lambda: factory.conference_expired("c"),
        lambda: factory.content_created("audio", "c"),
        lambda: factory.content_expired("audio", "c"),
        lambda: factory.transport_channel_added(1, "c", "ch"),
        lambda: factory.transport_channel_removed(1, "c", "ch"),
        lambda: factory.transport_connected(1, "c", "a -> b; "),
        lambda: factory.endpoint_created("c", "ep"),
    ],
)
def test_every_event_matches_its_schema_arity(build):
    event = build()
    assert len(event.columns) == len(event.values)
    assert all(value is not None for value in event.values)


def test_selected_pairs_are_rendered_per_component():
    stream = FakeStream(
        components=[
            FakeComponent(FakePair("10.0.0.1:10000", "1.2.3.4:5000")),
            FakeComponent(None),
            FakeComponent(FakePair("10.0.0.1:10001", "1.2.3.4:5001")),
        ]
    )
    assert format_selected_pairs(stream) == (
        "10.0.0.1:10000 -> 1.2.3.4:5000; 10.0.0.1:10001 -> 1.2.3.4:5001; "
    )


def test_event_requires_values():
    with pytest.raises(ValueError):
        Event(name="empty", columns=("a",), values=())


def test_make_event_freezes_rows():
    event = make_event("series", ["a", "b"], [[1, 2], [3, 4]])
    assert event.is_multipoint
    assert event.rows() == [(1, 2), (3, 4)]
    assert not make_event("series", ["a"], ["x"]).is_multipoint


def test_make_event_renders_bools_and_missing_values():
    flat = make_event("series", ["a", "b", "c"], [True, None, 3])
    assert flat.values == ("true", "null", 3)

    multi = make_event("series", ["a", "b"], [[False, 1.5], [None, "x"]])
    assert multi.rows() == [("false", 1.5), ("null", "x")]

"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Construction of lifecycle `Event` records with fixed column schemas.

Every function is pure: it maps a lifecycle signal and its arguments to an
`Event`. Absent arguments are written as the literal string ``"null"`` so no
null value ever reaches the wire payload.
"""

from __future__ import annotations

from ..contracts import (
    EVENT_CHANNEL_CREATED,
    EVENT_CHANNEL_EXPIRED,
    EVENT_CONFERENCE_CREATED,
    EVENT_CONFERENCE_EXPIRED,
    EVENT_CONFERENCE_ROOM,
    EVENT_CONTENT_CREATED,
    EVENT_CONTENT_EXPIRED,
    EVENT_ENDPOINT_CREATED,
    EVENT_ENDPOINT_DISPLAY_NAME,
    EVENT_FOCUS_CREATED,
    EVENT_TRANSPORT_CHANNEL_ADDED,
    EVENT_TRANSPORT_CHANNEL_REMOVED,
    EVENT_TRANSPORT_CONNECTED,
    EVENT_TRANSPORT_CREATED,
    EVENT_TRANSPORT_STATE_CHANGED,
)
from ..session.types import IceStream
from .models import Event, render_value

CONFERENCE_CREATED_COLUMNS = ("conference_id", "focus")
CONFERENCE_EXPIRED_COLUMNS = ("conference_id",)
CONTENT_CREATED_COLUMNS = ("name", "conference_id")
CONTENT_EXPIRED_COLUMNS = CONTENT_CREATED_COLUMNS
CHANNEL_CREATED_COLUMNS = (
    "channel_id",
    "content_name",
    "conference_id",
    "endpoint_id",
    "lastn",
)
CHANNEL_EXPIRED_COLUMNS = CHANNEL_CREATED_COLUMNS
TRANSPORT_CREATED_COLUMNS = (
    "hash_code",
    "conference_id",
    "num_components",
    "ufrag",
    "is_controlling",
)
TRANSPORT_CHANNEL_ADDED_COLUMNS = ("hash_code", "conference_id", "channel_id")
TRANSPORT_CHANNEL_REMOVED_COLUMNS = TRANSPORT_CHANNEL_ADDED_COLUMNS
TRANSPORT_CONNECTED_COLUMNS = ("hash_code", "conference_id", "selected_pairs")
TRANSPORT_STATE_CHANGED_COLUMNS = (
    "hash_code",
    "conference_id",
    "old_state",
    "new_state",
)
ENDPOINT_CREATED_COLUMNS = ("conference_id", "endpoint_id")
ENDPOINT_DISPLAY_NAME_COLUMNS = ("conference_id", "endpoint_id", "display_name")
FOCUS_CREATED_COLUMNS = ("room_jid",)
CONFERENCE_ROOM_COLUMNS = ("conference_id", "room_jid")


def _event(name: str, columns: tuple[str, ...], *values: object) -> Event:
    return Event(
        name=name, columns=columns, values=tuple(render_value(v) for v in values)
    )


def conference_created(conference_id: str | None, focus: str | None) -> Event:
    """Creation of a COLIBRI conference, with the JID that requested it."""
    return _event(
        EVENT_CONFERENCE_CREATED, CONFERENCE_CREATED_COLUMNS, conference_id, focus
    )


def conference_expired(conference_id: str | None) -> Event:
    return _event(EVENT_CONFERENCE_EXPIRED, CONFERENCE_EXPIRED_COLUMNS, conference_id)


def content_created(name: str | None, conference_id: str | None) -> Event:
    return _event(EVENT_CONTENT_CREATED, CONTENT_CREATED_COLUMNS, name, conference_id)


def content_expired(name: str | None, conference_id: str | None) -> Event:
    return _event(EVENT_CONTENT_EXPIRED, CONTENT_EXPIRED_COLUMNS, name, conference_id)


def channel_created(
    channel_id: str | None,
    content_name: str | None,
    conference_id: str | None,
    endpoint_id: str | None,
    last_n: int | None,
) -> Event:
    """
    Creation of a COLIBRI channel.

    Args:
        channel_id: Channel id.
        content_name: Name of the parent content.
        conference_id: Id of the parent conference.
        endpoint_id: Id of the channel's endpoint, ``""`` when unbound.
        last_n: Last-N value, ``-1`` for channels without one.
    """
    return _event(
        EVENT_CHANNEL_CREATED,
        CHANNEL_CREATED_COLUMNS,
        channel_id,
        content_name,
        conference_id,
        endpoint_id,
        last_n,
    )


def channel_expired(
    channel_id: str | None,
    content_name: str | None,
    conference_id: str | None,
    endpoint_id: str | None,
    last_n: int | None,
) -> Event:
    return _event(
        EVENT_CHANNEL_EXPIRED,
        CHANNEL_EXPIRED_COLUMNS,
        channel_id,
        content_name,
        conference_id,
        endpoint_id,
        last_n,
    )


def transport_created(
    hash_code: int,
    conference_id: str | None,
    num_components: int,
    ufrag: str | None,
    is_controlling: bool,
) -> Event:
    """Creation of an ICE transport manager (`is_controlling` is the ICE role)."""
    return _event(
        EVENT_TRANSPORT_CREATED,
        TRANSPORT_CREATED_COLUMNS,
        str(hash_code),
        conference_id,
        num_components,
        ufrag,
        is_controlling,
    )


def transport_channel_added(
    hash_code: int, conference_id: str | None, channel_id: str | None
) -> Event:
    return _event(
        EVENT_TRANSPORT_CHANNEL_ADDED,
        TRANSPORT_CHANNEL_ADDED_COLUMNS,
        str(hash_code),
        conference_id,
        channel_id,
    )


def transport_channel_removed(
    hash_code: int, conference_id: str | None, channel_id: str | None
) -> Event:
    return _event(
        EVENT_TRANSPORT_CHANNEL_REMOVED,
        TRANSPORT_CHANNEL_REMOVED_COLUMNS,
        str(hash_code),
        conference_id,
        channel_id,
    )


def transport_connected(
    hash_code: int, conference_id: str | None, selected_pairs: str | None
) -> Event:
    return _event(
        EVENT_TRANSPORT_CONNECTED,
        TRANSPORT_CONNECTED_COLUMNS,
        str(hash_code),
        conference_id,
        selected_pairs,
    )


def transport_state_changed(
    hash_code: int,
    conference_id: str | None,
    old_state: object | None,
    new_state: object | None,
) -> Event:
    """ICE state transition; states are rendered with `str()`."""
    return _event(
        EVENT_TRANSPORT_STATE_CHANGED,
        TRANSPORT_STATE_CHANGED_COLUMNS,
        str(hash_code),
        conference_id,
        None if old_state is None else str(old_state),
        None if new_state is None else str(new_state),
    )


def endpoint_created(conference_id: str | None, endpoint_id: str | None) -> Event:
    return _event(
        EVENT_ENDPOINT_CREATED, ENDPOINT_CREATED_COLUMNS, conference_id, endpoint_id
    )


def endpoint_display_name_changed(
    conference_id: str | None,
    endpoint_id: str | None,
    display_name: str | None,
) -> Event:
    return _event(
        EVENT_ENDPOINT_DISPLAY_NAME,
        ENDPOINT_DISPLAY_NAME_COLUMNS,
        conference_id,
        endpoint_id,
        display_name,
    )


def focus_created(room_jid: str | None) -> Event:
    """Creation of a conference focus for the MUC `room_jid`."""
    return _event(EVENT_FOCUS_CREATED, FOCUS_CREATED_COLUMNS, room_jid)


def conference_room(conference_id: str | None, room_jid: str | None) -> Event:
    """Binding of a COLIBRI conference id to the JID of its MUC."""
    return _event(
        EVENT_CONFERENCE_ROOM, CONFERENCE_ROOM_COLUMNS, conference_id, room_jid
    )


def format_selected_pairs(stream: IceStream) -> str:
    """Render the selected candidate pair of every ICE component."""
    parts: list[str] = []
    for component in stream.components:
        pair = component.selected_pair
        if pair is None:
            continue
        parts.append(f"{pair.local_address} -> {pair.remote_address}; ")
    return "".join(parts)

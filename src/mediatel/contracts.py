"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Stable event and metric names emitted by the telemetry pipeline.
"""

from __future__ import annotations

EVENT_CONFERENCE_CREATED = "conference_created"
EVENT_CONFERENCE_EXPIRED = "conference_expired"
EVENT_CONTENT_CREATED = "content_created"
EVENT_CONTENT_EXPIRED = "content_expired"
EVENT_CHANNEL_CREATED = "channel_created"
EVENT_CHANNEL_EXPIRED = "channel_expired"
EVENT_TRANSPORT_CREATED = "transport_created"
EVENT_TRANSPORT_CHANNEL_ADDED = "transport_channel_added"
EVENT_TRANSPORT_CHANNEL_REMOVED = "transport_channel_removed"
EVENT_TRANSPORT_CONNECTED = "transport_connected"
EVENT_TRANSPORT_STATE_CHANGED = "transport_state_changed"
EVENT_ENDPOINT_CREATED = "endpoint_created"
EVENT_ENDPOINT_DISPLAY_NAME = "endpoint_display_name"
EVENT_FOCUS_CREATED = "focus_created"
EVENT_CONFERENCE_ROOM = "conference_room"

TIME_COLUMN = "time"
NULL_VALUE = "null"

METRIC_CONFERENCES = "Conferences"
METRIC_CHANNELS = "Channels"
METRIC_CONFERENCE_LENGTH = "Conference length"
METRIC_CHANNEL_START_POSTFIX = " start"

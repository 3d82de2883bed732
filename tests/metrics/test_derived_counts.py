from __future__ import annotations

from mediatel.metrics import count_live_channels, count_live_conferences

from fakes import FakeContent, FakeVideobridge, add_channel, build_bridge


def test_live_conference_count_ignores_expired_and_missing():
    bridge = build_bridge(live=4, expired=3)
    bridge.conferences.append(None)
    assert count_live_conferences(bridge) == 4


def test_empty_bridge_counts_zero():
    bridge = FakeVideobridge()
    assert count_live_conferences(bridge) == 0
    assert count_live_channels(bridge) == 0


def test_channel_count_skips_expired_contents_and_channels():
    bridge = build_bridge(live=1)
    conference = bridge.conferences[0]
    add_channel(conference, "a1")
    add_channel(conference, "a2", expired=True)
    expired_content = FakeContent(name="data", conference=conference, is_expired=True)
    conference.contents.append(expired_content)
    add_channel(conference, "d1", content_name="data")
    conference.contents.append(None)

    assert count_live_channels(bridge) == 1

"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Derived metrics recomputed from the live session tree.

Counts are point-in-time snapshots taken without synchronization against the
session model; concurrent expirations may make them briefly off by a few.
"""

from __future__ import annotations

from ..session.types import Videobridge


def count_live_conferences(videobridge: Videobridge) -> int:
    """Count conferences whose expired flag is not set."""
    # Expiring conferences are still listed when their expiry is notified.
    return sum(1 for c in videobridge.conferences or () if c is not None and not c.is_expired)


def count_live_channels(videobridge: Videobridge) -> int:
    """Count live channels inside live contents of live conferences."""
    total = 0
    for conference in videobridge.conferences or ():
        if conference is None or conference.is_expired:
            continue
        for content in conference.contents or ():
            if content is None or content.is_expired:
                continue
            for channel in content.channels or ():
                if channel is not None and not channel.is_expired:
                    total += 1
    return total

"""
bridge_telemetry.py: minimal telemetry wiring example.

Builds the logging service from `MEDIATEL_*` environment variables and
notifies it about one conference. With nothing configured, metrics go to
the logging publisher so the output is visible on stderr.

Usage:
    export MEDIATEL_INFLUX_ENABLED=true
    export MEDIATEL_INFLUX_URL_BASE=http://localhost:8086
    export MEDIATEL_INFLUX_DATABASE=jvb
    export MEDIATEL_INFLUX_USER=root
    export MEDIATEL_INFLUX_PASS=root
    python examples/bridge_telemetry.py
"""

import logging
from dataclasses import dataclass, field

from mediatel.bootstrap import create_logging_service
from mediatel.config import MetricSettings


@dataclass(eq=False)
class Bridge:
    conferences: list = field(default_factory=list)


@dataclass(eq=False)
class Conference:
    id: str
    focus: str | None = None
    is_expired: bool = False
    videobridge: Bridge | None = None
    contents: list = field(default_factory=list)


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    service = create_logging_service(
        metrics=MetricSettings(enabled=True, publishers=("logging",)),
    )

    bridge = Bridge()
    conference = Conference(id="demo", focus="focus@auth.example.com", videobridge=bridge)
    bridge.conferences.append(conference)

    service.conference_created(conference)
    conference.is_expired = True
    service.conference_expired(conference)


if __name__ == "__main__":
    main()

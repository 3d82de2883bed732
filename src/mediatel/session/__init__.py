"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Read-only session model protocols.
"""

from .types import (
    CandidatePair,
    Channel,
    Conference,
    Content,
    Endpoint,
    IceAgent,
    IceComponent,
    IceStream,
    IceTransportManager,
    LastNCapable,
    RtpChannel,
    Videobridge,
)

__all__ = [
    "Videobridge",
    "Conference",
    "Content",
    "Channel",
    "RtpChannel",
    "LastNCapable",
    "Endpoint",
    "IceTransportManager",
    "IceAgent",
    "IceStream",
    "IceComponent",
    "CandidatePair",
]

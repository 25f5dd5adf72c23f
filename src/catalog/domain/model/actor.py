"""The authenticated identity performing a request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Supplied by the authentication layer; never built from a request body."""

    actor_id: str
    display_name: str = ""

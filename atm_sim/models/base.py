"""Base models shared across domains."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """Standard event envelope for logged state changes."""

    event_id: str
    event_type: str  # entity.action (e.g., transaction.created)
    event_time: datetime
    source: str  # Service that emitted the event
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)

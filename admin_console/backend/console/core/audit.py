import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditEvent:
    action: str
    entity: Optional[str]
    entity_id: Any
    outcome: str
    meta: Optional[dict[str, Any]] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class AuditTrail:
    """Bounded in-memory record of mutation outcomes, newest last."""

    def __init__(self, maxlen: int = 200):
        self._events: deque[AuditEvent] = deque(maxlen=maxlen)

    def add(self, event: AuditEvent) -> None:
        self._events.append(event)

    def recent(self, limit: int = 50) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]

    def __len__(self) -> int:
        return len(self._events)


def log_event(
    trail: Optional[AuditTrail],
    action: str,
    outcome: str,
    entity: Optional[str] = None,
    entity_id: Any = None,
    meta: Optional[dict[str, Any]] = None,
) -> AuditEvent:
    event = AuditEvent(
        action=action,
        entity=entity,
        entity_id=entity_id,
        outcome=outcome,
        meta=meta,
    )
    if trail is not None:
        trail.add(event)

    level = logging.WARNING if outcome == "rolled_back" else logging.INFO
    logger.log(level, "%s %s id=%r %s", action, outcome, entity_id, meta or "")
    return event

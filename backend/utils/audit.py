import logging
from typing import Any, Dict, Optional, Protocol

from sqlalchemy.orm import Session
from models.log import AuditLog

logger = logging.getLogger(__name__)


class AuditSink(Protocol):
    def record(self, db: Session, *, user_id: Optional[str], action_type: str, entity_type: str,
               entity_id: Any, details: Optional[Dict[str, Any]] = None) -> None: ...


class DatabaseAuditSink:
    """Adds an AuditLog row to the caller's session.

    Nothing is committed here: the entry becomes part of whatever transaction
    the caller is running, so it is persisted or rolled back together with it.
    """

    def record(self, db: Session, *, user_id, action_type, entity_type, entity_id, details=None):
        entry = AuditLog(
            user_id=user_id,
            action_type=action_type,
            entity_type=entity_type,
            entity_id=str(entity_id) if entity_id is not None else None,
            details=details or {},
        )
        db.add(entry)
        db.flush()
        logger.info("[AUDIT] User %s performed %s on %s %s %s",
                    user_id, action_type, entity_type, entity_id, details)


default_audit_sink = DatabaseAuditSink()


def get_audit_sink() -> AuditSink:
    return default_audit_sink

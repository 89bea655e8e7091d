import logging
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)


class EventPublisher(Protocol):
    def publish(self, event: Dict[str, Any]) -> None: ...


# Stand-in for a broker client. Delivery is at-most-once: callers publish
# after their transaction commits and never retry.
class LoggingEventPublisher:
    def publish(self, event: Dict[str, Any]) -> None:
        logger.info("[QUEUE] Queuing stock update event: %s", event)


default_event_publisher = LoggingEventPublisher()


def get_event_publisher() -> EventPublisher:
    return default_event_publisher

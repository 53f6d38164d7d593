"""DDD application layer."""

from .event_publisher import EventDeliveryError, EventPublisher, NullEventPublisher
from .forwarding_service import ForwardOperationEvents

__all__ = ["EventDeliveryError", "EventPublisher", "NullEventPublisher", "ForwardOperationEvents"]

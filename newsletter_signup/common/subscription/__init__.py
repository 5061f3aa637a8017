"""구독 도메인 패키지"""

from .models import (
    SubscriptionType, HistoryEventType,
    SubscriptionCreate, Subscription, SubscriptionHistoryEvent,
)
from .validation import parse_valid_string, standardize_email

__all__ = [
    "SubscriptionType", "HistoryEventType",
    "SubscriptionCreate", "Subscription", "SubscriptionHistoryEvent",
    "parse_valid_string", "standardize_email",
]

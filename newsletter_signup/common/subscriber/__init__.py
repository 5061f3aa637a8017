"""구독자 도메인 패키지"""

from .models import SubscriberCreate, Subscriber

__all__ = ["SubscriberCreate", "Subscriber"]

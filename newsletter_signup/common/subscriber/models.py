"""
구독자 도메인 모델
구독(Subscription.subscriber_id)이 가리키는 구독자 입력 모델과 레코드
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, EmailStr, field_validator

from ..subscription.validation import parse_valid_string, standardize_email

logger = logging.getLogger(__name__)


class SubscriberCreate(BaseModel):
    """신규 구독자 요청"""

    name: str
    email_address: EmailStr
    user_id: str

    @field_validator("name", "user_id")
    @classmethod
    def _check_text(cls, value: str, info) -> str:
        return parse_valid_string(value, info.field_name)

    @field_validator("email_address")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return standardize_email(value)


@dataclass
class Subscriber:
    """구독자 레코드"""
    name: str
    email_address: str
    user_id: str
    stripe_customer_id: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def create(cls, new: SubscriberCreate) -> "Subscriber":
        subscriber = cls(
            name=new.name,
            email_address=new.email_address,
            user_id=new.user_id,
        )
        logger.info(f"구독자 생성: id={subscriber.id}, user={subscriber.user_id}")
        return subscriber

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Subscriber":
        """저장된 행에서 구독자 레코드 복원"""
        return cls(
            id=uuid.UUID(str(row["id"])) if row.get("id") else uuid.uuid4(),
            name=row["name"],
            email_address=standardize_email(row["email_address"]),
            user_id=str(row["user_id"]),
            stripe_customer_id=row.get("stripe_customer_id") or None,
        )

    def set_stripe_customer_id(self, stripe_customer_id: str) -> None:
        """결제 고객 ID 연결 (외부 참조값으로 저장만 한다)"""
        self.stripe_customer_id = parse_valid_string(stripe_customer_id, "stripe_customer_id")
        logger.info(f"구독자 결제 고객 ID 설정: id={self.id}")

    def owns(self, subscription) -> bool:
        """구독이 이 구독자에 속하는지 여부"""
        return subscription.subscriber_id == self.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "email_address": self.email_address,
            "user_id": self.user_id,
            "stripe_customer_id": self.stripe_customer_id,
        }

    def __repr__(self):
        return f"<Subscriber(id={self.id}, email='{self.email_address}')>"

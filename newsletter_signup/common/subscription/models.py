"""
구독 도메인 모델
구독 유형/이력 이벤트 코덱, 신규 구독 입력 모델, 구독 레코드
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, EmailStr, field_validator, model_validator

from ..renewal.calculator import RenewalDate, calculate_renewal, validate_anniversary
from ..renewal.calendar_utils import parse_utc_datetime, to_utc
from .validation import parse_optional_string, parse_valid_string, standardize_email

logger = logging.getLogger(__name__)


class _StoredEnum(str, Enum):
    """문자열로 저장되는 열거형 공통 코덱"""

    def as_str(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: str, default: Optional["_StoredEnum"] = None):
        """저장 문자열 → 열거형

        인식할 수 없는 값은 ValueError. default를 명시한 경우에만
        경고를 남기고 default를 반환한다.
        """
        for member in cls:
            if member.value == value:
                return member
        if default is None:
            raise ValueError(f"{cls.__name__}에 매핑할 수 없는 값입니다: {value!r}")
        logger.warning(f"{cls.__name__} 매핑 실패: {value!r} → 기본값 {default.value}")
        return default


class SubscriptionType(_StoredEnum):
    """구독 유형"""
    DIGITAL = "Digital"
    PAPER = "Paper"


class HistoryEventType(_StoredEnum):
    """구독 변경 이력 유형"""
    CREATED = "Created"
    CHANGED_PAYMENT_METHOD = "ChangedPaymentMethod"
    CANCELLED = "Cancelled"
    UPDATED_SUBSCRIPTION_INFORMATION = "UpdatedSubscriptionInformation"


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


class SubscriptionCreate(BaseModel):
    """신규 구독 요청"""

    subscriber_id: uuid.UUID
    subscription_name: str
    subscription_mailing_address_line_1: str
    subscription_mailing_address_line_2: Optional[str] = None
    subscription_city: str
    subscription_state: str
    subscription_postal_code: str
    subscription_email_address: EmailStr
    subscription_type: SubscriptionType
    subscription_anniversary_month: Optional[int] = None
    subscription_anniversary_day: Optional[int] = None

    @field_validator(
        "subscription_name",
        "subscription_mailing_address_line_1",
        "subscription_city",
        "subscription_state",
        "subscription_postal_code",
    )
    @classmethod
    def _check_text(cls, value: str, info) -> str:
        return parse_valid_string(value, info.field_name)

    @field_validator("subscription_mailing_address_line_2")
    @classmethod
    def _check_optional_text(cls, value, info):
        return parse_optional_string(value, info.field_name)

    @field_validator("subscription_email_address")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return standardize_email(value)

    @field_validator("subscription_type", mode="before")
    @classmethod
    def _decode_type(cls, value):
        if isinstance(value, SubscriptionType):
            return value
        return SubscriptionType.from_str(value)

    @model_validator(mode="after")
    def _check_anniversary(self):
        month = self.subscription_anniversary_month
        day = self.subscription_anniversary_day
        if (month is None) != (day is None):
            raise ValueError("기념일 월과 일은 함께 지정해야 합니다.")
        if month is not None:
            validate_anniversary(month, day)
        return self


@dataclass
class Subscription:
    """구독 레코드"""
    subscriber_id: uuid.UUID
    subscription_name: str
    subscription_mailing_address_line_1: str
    subscription_city: str
    subscription_state: str
    subscription_postal_code: str
    subscription_email_address: str
    subscription_creation_date: datetime
    subscription_anniversary_day: int
    subscription_anniversary_month: int
    subscription_type: SubscriptionType
    stripe_subscription_id: str = ""
    subscription_mailing_address_line_2: str = ""
    subscription_cancelled_on_date: Optional[datetime] = None
    active: bool = True
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def create(
        cls,
        new: SubscriptionCreate,
        stripe_subscription_id: str,
        now: Optional[datetime] = None,
    ) -> "Subscription":
        """신규 구독 레코드 생성 (기념일 미지정 시 생성일 기준)"""
        created = to_utc(now) if now else datetime.now(timezone.utc)

        month = new.subscription_anniversary_month or created.month
        day = new.subscription_anniversary_day or created.day

        subscription = cls(
            subscriber_id=new.subscriber_id,
            subscription_name=new.subscription_name,
            subscription_mailing_address_line_1=new.subscription_mailing_address_line_1,
            subscription_mailing_address_line_2=new.subscription_mailing_address_line_2 or "",
            subscription_city=new.subscription_city,
            subscription_state=new.subscription_state,
            subscription_postal_code=new.subscription_postal_code,
            subscription_email_address=new.subscription_email_address,
            subscription_creation_date=created,
            subscription_anniversary_day=day,
            subscription_anniversary_month=month,
            subscription_type=new.subscription_type,
            stripe_subscription_id=stripe_subscription_id,
        )
        logger.info(
            f"구독 생성: subscriber={subscription.subscriber_id}, "
            f"type={subscription.subscription_type.as_str()}, 기념일={month}/{day}"
        )
        return subscription

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Subscription":
        """저장된 행(dict, CSV 행)에서 구독 레코드 복원"""
        created = parse_utc_datetime(row["subscription_creation_date"])
        if created is None:
            raise ValueError("구독 생성일이 비어 있습니다.")

        return cls(
            id=uuid.UUID(str(row["id"])) if row.get("id") else uuid.uuid4(),
            subscriber_id=uuid.UUID(str(row["subscriber_id"])),
            subscription_name=row["subscription_name"],
            subscription_mailing_address_line_1=row["subscription_mailing_address_line_1"],
            subscription_mailing_address_line_2=row.get("subscription_mailing_address_line_2") or "",
            subscription_city=row["subscription_city"],
            subscription_state=row["subscription_state"],
            subscription_postal_code=row["subscription_postal_code"],
            subscription_email_address=row["subscription_email_address"],
            subscription_creation_date=created,
            subscription_cancelled_on_date=parse_utc_datetime(
                row.get("subscription_cancelled_on_date")
            ),
            subscription_anniversary_day=int(row["subscription_anniversary_day"]),
            subscription_anniversary_month=int(row["subscription_anniversary_month"]),
            active=_parse_bool(row.get("active", True)),
            subscription_type=SubscriptionType.from_str(row["subscription_type"]),
            stripe_subscription_id=row.get("stripe_subscription_id") or "",
        )

    def renewal(self, today: Optional[date] = None) -> RenewalDate:
        return calculate_renewal(
            self.subscription_anniversary_month,
            self.subscription_anniversary_day,
            self.subscription_creation_date,
            today,
        )

    def renewal_date(self, today: Optional[date] = None) -> str:
        """갱신일 문자열 ("M/D/YYYY")"""
        return self.renewal(today).date_string

    def cancel(self, now: Optional[datetime] = None) -> None:
        """구독 해지"""
        self.active = False
        self.subscription_cancelled_on_date = to_utc(now) if now else datetime.now(timezone.utc)
        logger.info(f"구독 해지: id={self.id}")

    def to_dict(self, today: Optional[date] = None) -> Dict[str, Any]:
        """응답용 직렬화 (subscription_renewal_date 포함)"""
        cancelled = self.subscription_cancelled_on_date
        return {
            "id": str(self.id),
            "subscriber_id": str(self.subscriber_id),
            "subscription_name": self.subscription_name,
            "subscription_mailing_address_line_1": self.subscription_mailing_address_line_1,
            "subscription_mailing_address_line_2": self.subscription_mailing_address_line_2,
            "subscription_city": self.subscription_city,
            "subscription_state": self.subscription_state,
            "subscription_postal_code": self.subscription_postal_code,
            "subscription_email_address": self.subscription_email_address,
            "subscription_creation_date": self.subscription_creation_date.isoformat(),
            "subscription_cancelled_on_date": cancelled.isoformat() if cancelled else None,
            "subscription_anniversary_day": self.subscription_anniversary_day,
            "subscription_anniversary_month": self.subscription_anniversary_month,
            "subscription_renewal_date": self.renewal_date(today),
            "active": self.active,
            "subscription_type": self.subscription_type.as_str(),
            "stripe_subscription_id": self.stripe_subscription_id,
        }

    def __repr__(self):
        return f"<Subscription(id={self.id}, email='{self.subscription_email_address}')>"


@dataclass
class SubscriptionHistoryEvent:
    """구독 변경 이력 (변경 시점의 구독 스냅샷)"""
    subscription_id: uuid.UUID
    subscription_change_event_type: HistoryEventType
    subscription_change_event_date: datetime
    subscription: Dict[str, Any]
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def record(
        cls,
        subscription: Subscription,
        event_type: HistoryEventType,
        now: Optional[datetime] = None,
    ) -> "SubscriptionHistoryEvent":
        event_date = to_utc(now) if now else datetime.now(timezone.utc)
        return cls(
            subscription_id=subscription.id,
            subscription_change_event_type=event_type,
            subscription_change_event_date=event_date,
            subscription=subscription.to_dict(today=event_date.date()),
        )

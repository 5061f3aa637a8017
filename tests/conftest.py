"""
newsletter_signup 테스트 공통 fixture
"""

import uuid
from datetime import date, datetime, timezone

import pytest

from newsletter_signup.common.subscription.models import (
    Subscription, SubscriptionCreate, SubscriptionType
)


@pytest.fixture
def leap_day_created():
    return datetime(2024, 2, 29, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def new_subscription():
    return SubscriptionCreate(
        subscriber_id=uuid.UUID("6f1c1f0e-6b1c-4c59-9d58-2a0e3c1c7a11"),
        subscription_name="Jane Reader",
        subscription_mailing_address_line_1="12 Main Street",
        subscription_city="Springfield",
        subscription_state="IL",
        subscription_postal_code="62701",
        subscription_email_address="Jane.Reader@Example.com",
        subscription_type="Paper",
    )


@pytest.fixture
def subscription(new_subscription, leap_day_created):
    return Subscription.create(
        new_subscription, stripe_subscription_id="sub_123", now=leap_day_created
    )


@pytest.fixture
def subscription_row():
    return {
        "id": "0b7a0a52-3f5e-4d43-8e0c-2a7d5d1c9e01",
        "subscriber_id": "6f1c1f0e-6b1c-4c59-9d58-2a0e3c1c7a11",
        "subscription_name": "Jane Reader",
        "subscription_mailing_address_line_1": "12 Main Street",
        "subscription_mailing_address_line_2": "",
        "subscription_city": "Springfield",
        "subscription_state": "IL",
        "subscription_postal_code": "62701",
        "subscription_email_address": "jane.reader@example.com",
        "subscription_creation_date": "2024-02-29T10:00:00Z",
        "subscription_cancelled_on_date": "",
        "subscription_anniversary_day": "29",
        "subscription_anniversary_month": "2",
        "active": "true",
        "subscription_type": SubscriptionType.DIGITAL.as_str(),
        "stripe_subscription_id": "sub_123",
    }


@pytest.fixture
def fixed_today():
    return date(2024, 3, 1)

"""
구독 갱신일 계산 모듈
기념일(월/일)과 생성 시각으로 다음 갱신 연도와 갱신일 문자열을 계산한다
"""

import logging
from datetime import date, datetime, timezone
from typing import NamedTuple, Optional

from .calendar_utils import is_leap_year, max_anniversary_day

logger = logging.getLogger(__name__)


class InvalidAnniversaryError(ValueError):
    """달력에 존재할 수 없는 기념일 (예: 4월 31일, 13월)"""


class RenewalDate(NamedTuple):
    """갱신일 계산 결과"""
    year: int
    date_string: str
    renewal_at: datetime


def utc_today() -> date:
    """현재 UTC 날짜 (운영 시계)"""
    return datetime.now(timezone.utc).date()


def validate_anniversary(anniversary_month: int, anniversary_day: int) -> None:
    """기념일 선행조건 검증, 위반 시 InvalidAnniversaryError"""
    if not 1 <= anniversary_month <= 12:
        raise InvalidAnniversaryError(f"잘못된 기념일 월입니다: {anniversary_month}")
    if not 1 <= anniversary_day <= max_anniversary_day(anniversary_month):
        raise InvalidAnniversaryError(
            f"잘못된 기념일입니다: {anniversary_month}월 {anniversary_day}일"
        )


def resolve_renewal_year(
    anniversary_month: int,
    anniversary_day: int,
    creation_year: int,
    today: Optional[date] = None,
) -> int:
    """다음 갱신이 일어나는 연도

    규칙은 순서대로 평가한다 (먼저 일치한 규칙 적용):
      1. 오늘이 기념일이고 생성 연도가 올해 → 내년
      2. 오늘이 기념일 → 올해
      3. 같은 달, 기념일이 지남 → 내년
      4. 같은 달, 기념일 이전 → 올해
      5. 기념일 월이 지남 → 내년
      6. 그 외 → 올해

    Args:
        today: 기준 날짜 (UTC). 생략 시 현재 UTC 날짜를 한 번 읽는다.
    """
    if today is None:
        today = utc_today()

    current_year = today.year

    if today.month == anniversary_month and today.day == anniversary_day:
        # 기념일 당일에 생성된 구독은 오늘 갱신 대상이 아님
        if current_year == creation_year:
            return current_year + 1
        return current_year

    if today.month == anniversary_month:
        if today.day > anniversary_day:
            return current_year + 1
        return current_year

    if today.month > anniversary_month:
        return current_year + 1
    return current_year


def calculate_renewal(
    anniversary_month: int,
    anniversary_day: int,
    creation_timestamp: datetime,
    today: Optional[date] = None,
) -> RenewalDate:
    """갱신 연도, 갱신일 문자열, 갱신 시각 계산

    2월 29일 기념일이 평년에 걸리면 2월 28일로 보정한다.
    갱신 시각은 생성 시각의 시/분/초를 유지한다.

    Raises:
        InvalidAnniversaryError: 기념일이 달력에 존재할 수 없는 경우
    """
    validate_anniversary(anniversary_month, anniversary_day)

    if creation_timestamp.tzinfo is not None:
        creation_timestamp = creation_timestamp.astimezone(timezone.utc)

    renewal_year = resolve_renewal_year(
        anniversary_month, anniversary_day, creation_timestamp.year, today
    )

    day = anniversary_day
    if anniversary_month == 2 and anniversary_day == 29 and not is_leap_year(renewal_year):
        logger.debug(f"평년 보정: {renewal_year}년 2월 29일 → 2월 28일")
        day = 28

    renewal_at = creation_timestamp.replace(
        year=renewal_year, month=anniversary_month, day=day
    )
    date_string = f"{renewal_at.month}/{renewal_at.day}/{renewal_at.year}"
    return RenewalDate(renewal_year, date_string, renewal_at)


def format_renewal_date(
    anniversary_month: int,
    anniversary_day: int,
    creation_timestamp: datetime,
    today: Optional[date] = None,
) -> str:
    """갱신일 문자열 ("M/D/YYYY", 0 채움 없음)"""
    return calculate_renewal(
        anniversary_month, anniversary_day, creation_timestamp, today
    ).date_string

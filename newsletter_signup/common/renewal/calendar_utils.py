"""
그레고리력 날짜 유틸리티
"""

import calendar
from datetime import datetime, timezone
from typing import Optional

# 연도와 무관하게 기념일로 허용되는 최대 일자 (2월은 윤년 기준 29일)
_MAX_ANNIVERSARY_DAY = {
    1: 31, 2: 29, 3: 31, 4: 30, 5: 31, 6: 30,
    7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31,
}


def is_leap_year(year: int) -> bool:
    """윤년 여부 (4로 나누어떨어지고, 100의 배수는 400의 배수일 때만)"""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """해당 연월의 일수"""
    if month < 1 or month > 12:
        raise ValueError(f"잘못된 월입니다: {month}")
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def max_anniversary_day(month: int) -> int:
    """기념일로 지정 가능한 최대 일자"""
    if month not in _MAX_ANNIVERSARY_DAY:
        raise ValueError(f"잘못된 월입니다: {month}")
    return _MAX_ANNIVERSARY_DAY[month]


def to_utc(value: datetime) -> datetime:
    """UTC 변환 (timezone 없는 값은 UTC로 간주)"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_utc_datetime(value) -> Optional[datetime]:
    """ISO-8601 문자열/datetime → UTC datetime ('Z' 접미사 허용, 빈 값은 None)"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(text))

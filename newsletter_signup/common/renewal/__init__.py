"""구독 갱신일 계산 패키지"""

from .calculator import (
    InvalidAnniversaryError, RenewalDate,
    calculate_renewal, format_renewal_date, resolve_renewal_year,
)
from .calendar_utils import is_leap_year, days_in_month, days_in_year
from .batch import (
    BatchResult, RowFailure,
    annotate_renewal_dates, read_subscription_rows, write_subscription_rows,
)

__all__ = [
    "InvalidAnniversaryError", "RenewalDate",
    "calculate_renewal", "format_renewal_date", "resolve_renewal_year",
    "is_leap_year", "days_in_month", "days_in_year",
    "BatchResult", "RowFailure",
    "annotate_renewal_dates", "read_subscription_rows", "write_subscription_rows",
]

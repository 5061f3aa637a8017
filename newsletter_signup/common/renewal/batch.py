"""
구독 행 일괄 갱신일 계산
구독자 CSV 내보내기 형식의 행마다 subscription_renewal_date를 채운다
"""

import csv
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from .calculator import calculate_renewal, utc_today
from .calendar_utils import parse_utc_datetime

logger = logging.getLogger(__name__)

RENEWAL_COLUMN = "subscription_renewal_date"


@dataclass
class RowFailure:
    """계산 실패 행"""
    row_number: int
    error_message: str


@dataclass
class BatchResult:
    """일괄 계산 결과"""
    rows: List[Dict[str, str]] = field(default_factory=list)
    failures: List[RowFailure] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.rows) - len(self.failures)


def _parse_creation(value: Optional[str]) -> datetime:
    parsed = parse_utc_datetime(value)
    if parsed is None:
        raise ValueError("구독 생성일이 비어 있습니다.")
    return parsed


def annotate_renewal_dates(
    rows: Iterable[Mapping[str, str]],
    today: Optional[date] = None,
) -> BatchResult:
    """행마다 갱신일 계산

    실패한 행은 갱신일을 비워 두고 failures에 기록한다.
    기준 날짜는 한 번만 읽어 모든 행에 동일하게 적용한다.
    """
    if today is None:
        today = utc_today()

    result = BatchResult()
    for row_number, row in enumerate(rows, start=1):
        annotated = dict(row)
        try:
            renewal = calculate_renewal(
                int(row["subscription_anniversary_month"]),
                int(row["subscription_anniversary_day"]),
                _parse_creation(row["subscription_creation_date"]),
                today,
            )
            annotated[RENEWAL_COLUMN] = renewal.date_string
        except (KeyError, TypeError, ValueError) as e:
            annotated[RENEWAL_COLUMN] = ""
            message = f"누락된 컬럼: {e}" if isinstance(e, KeyError) else str(e)
            result.failures.append(RowFailure(row_number=row_number, error_message=message))
            logger.error(f"갱신일 계산 실패 (행 {row_number}): {message}")
        result.rows.append(annotated)

    logger.info(f"갱신일 일괄 계산 완료: {result.success_count}/{len(result.rows)} 성공")
    return result


def read_subscription_rows(path, encoding: str = "utf-8") -> List[Dict[str, str]]:
    """구독 CSV 읽기"""
    with open(Path(path), newline="", encoding=encoding) as f:
        return list(csv.DictReader(f))


def write_subscription_rows(rows: List[Dict[str, str]], path, encoding: str = "utf-8") -> None:
    """구독 CSV 쓰기 (갱신일 컬럼 포함)"""
    fieldnames: List[str] = []
    for row in rows:
        for key in row:
            if key not in fieldnames:
                fieldnames.append(key)
    if RENEWAL_COLUMN not in fieldnames:
        fieldnames.append(RENEWAL_COLUMN)

    with open(Path(path), "w", newline="", encoding=encoding) as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, restval="")
        writer.writeheader()
        writer.writerows(rows)

"""
newsletter_signup 메인 실행 파일
구독 갱신일 계산 / CSV 일괄 계산 / 신규 구독 알림 미리보기
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import settings
from .common.renewal.batch import (
    annotate_renewal_dates, read_subscription_rows, write_subscription_rows
)
from .common.renewal.calculator import calculate_renewal
from .common.renewal.calendar_utils import parse_utc_datetime
from .common.subscription.models import Subscription
from .common.template.renderer import get_renderer

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """로깅 설정"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_to_file:
        log_dir = settings.BASE_DIR / "logs"
        log_dir.mkdir(exist_ok=True)
        handlers.append(
            logging.FileHandler(log_dir / "newsletter_signup.log", encoding="utf-8")
        )

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def run_single(month: int, day: int, created: str, today: Optional[date]) -> int:
    """단일 갱신일 계산"""
    creation_timestamp = parse_utc_datetime(created)
    if creation_timestamp is None:
        logger.error("구독 생성일(--created)이 필요합니다.")
        return 1

    renewal = calculate_renewal(month, day, creation_timestamp, today)
    logger.info(f"갱신일 계산: 기념일={month}/{day}, 생성={creation_timestamp.isoformat()} → {renewal.date_string}")
    print(renewal.date_string)
    return 0


def run_batch(csv_path: str, output_path: Optional[str], today: Optional[date]) -> int:
    """CSV 일괄 갱신일 계산"""
    rows = read_subscription_rows(csv_path, encoding=settings.csv_encoding)
    result = annotate_renewal_dates(rows, today)

    if output_path:
        write_subscription_rows(result.rows, output_path, encoding=settings.csv_encoding)
        logger.info(f"결과 저장: {output_path}")
    else:
        for row in result.rows:
            print(f"{row.get('id', '')},{row['subscription_renewal_date']}")

    for failure in result.failures:
        print(f"행 {failure.row_number}: {failure.error_message}", file=sys.stderr)

    return 1 if result.failures else 0


def run_preview(json_path: str, today: Optional[date]) -> int:
    """신규 구독 알림 미리보기"""
    row = json.loads(Path(json_path).read_text(encoding="utf-8"))
    if not isinstance(row, dict):
        raise ValueError(f"구독 JSON은 객체여야 합니다: {type(row).__name__}")
    subscription = Subscription.from_row(row)

    subject, _, text_content = get_renderer().render_new_subscription_notification(
        subscription, today
    )
    recipients = ", ".join(settings.subscription_notification_addresses) or "(수신자 미설정)"

    print(f"To: {recipients}")
    print(f"Subject: {subject}")
    print()
    print(text_content)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    parser = argparse.ArgumentParser(description="newsletter_signup - 구독 갱신일 계산")
    parser.add_argument("--month", type=int, help="기념일 월 (1-12)")
    parser.add_argument("--day", type=int, help="기념일 일")
    parser.add_argument("--created", type=str, help="구독 생성 시각 (ISO-8601, 예: 2024-02-29T10:00:00Z)")
    parser.add_argument("--csv", type=str, help="구독 CSV 일괄 계산")
    parser.add_argument("--output", type=str, help="일괄 계산 결과 CSV 경로", default=None)
    parser.add_argument("--preview-notification", type=str, metavar="JSON",
                        help="구독 JSON으로 신규 구독 알림 미리보기")
    parser.add_argument("--today", type=date.fromisoformat, default=None,
                        help="기준 날짜 (YYYY-MM-DD, 기본: 현재 UTC 날짜)")

    args = parser.parse_args(argv)

    # 환경 변수 로드
    load_dotenv()
    setup_logging()

    try:
        if args.csv:
            return run_batch(args.csv, args.output, args.today)
        if args.preview_notification:
            return run_preview(args.preview_notification, args.today)
        if args.month is not None and args.day is not None:
            return run_single(args.month, args.day, args.created or "", args.today)
    except (ValueError, KeyError, TypeError, OSError) as e:
        logger.error(f"처리 실패: {e}")
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())

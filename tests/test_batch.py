"""
구독 CSV 일괄 갱신일 계산 테스트
"""

import csv
from datetime import date

import pytest

from newsletter_signup.common.renewal.batch import (
    RENEWAL_COLUMN, annotate_renewal_dates, read_subscription_rows,
    write_subscription_rows,
)


def _row(month, day, created, **extra):
    row = {
        "subscription_anniversary_month": str(month),
        "subscription_anniversary_day": str(day),
        "subscription_creation_date": created,
    }
    row.update(extra)
    return row


class TestAnnotateRenewalDates:

    def test_all_rows_succeed(self):
        rows = [
            _row(2, 29, "2024-02-29T10:00:00Z", id="a"),
            _row(1, 1, "2023-01-01T00:00:00Z", id="b"),
        ]
        result = annotate_renewal_dates(rows, today=date(2024, 3, 1))
        assert result.failures == []
        assert result.success_count == 2
        assert [r[RENEWAL_COLUMN] for r in result.rows] == ["2/28/2025", "1/1/2025"]
        assert result.rows[0]["id"] == "a"

    def test_input_rows_not_mutated(self):
        rows = [_row(6, 1, "2020-06-01T00:00:00Z")]
        annotate_renewal_dates(rows, today=date(2024, 3, 1))
        assert RENEWAL_COLUMN not in rows[0]

    def test_failures_reported_per_row(self):
        rows = [
            _row(4, 31, "2024-01-01T00:00:00Z"),
            _row(5, 5, ""),
            _row("x", 5, "2024-01-01T00:00:00Z"),
            {"subscription_anniversary_month": "5"},
            _row(5, 5, "2024-01-01T00:00:00Z"),
        ]
        result = annotate_renewal_dates(rows, today=date(2024, 3, 1))
        assert [f.row_number for f in result.failures] == [1, 2, 3, 4]
        assert result.success_count == 1
        assert [r[RENEWAL_COLUMN] for r in result.rows] == ["", "", "", "", "5/5/2024"]

    def test_failures_logged(self, caplog):
        annotate_renewal_dates([_row(13, 1, "2024-01-01T00:00:00Z")], today=date(2024, 3, 1))
        assert "행 1" in caplog.text

    def test_empty_input(self):
        result = annotate_renewal_dates([], today=date(2024, 3, 1))
        assert result.rows == []
        assert result.success_count == 0


class TestCsvIo:

    @pytest.fixture
    def csv_path(self, tmp_path):
        path = tmp_path / "subscriptions.csv"
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "id", "subscription_name", "subscription_anniversary_month",
                "subscription_anniversary_day", "subscription_creation_date",
            ])
            writer.writerow(["1", "김구독", "2", "29", "2024-02-29T10:00:00Z"])
            writer.writerow(["2", "Jane", "4", "31", "2024-04-01T10:00:00Z"])
        return path

    def test_read_annotate_write(self, csv_path, tmp_path):
        rows = read_subscription_rows(csv_path)
        assert rows[0]["subscription_name"] == "김구독"

        result = annotate_renewal_dates(rows, today=date(2028, 1, 15))
        output = tmp_path / "out.csv"
        write_subscription_rows(result.rows, output)

        written = read_subscription_rows(output)
        assert list(written[0].keys())[-1] == RENEWAL_COLUMN
        assert written[0][RENEWAL_COLUMN] == "2/29/2028"
        assert written[1][RENEWAL_COLUMN] == ""
        assert len(result.failures) == 1

    def test_write_empty_rows_has_renewal_header(self, tmp_path):
        output = tmp_path / "empty.csv"
        write_subscription_rows([], output)
        assert output.read_text(encoding="utf-8").strip() == RENEWAL_COLUMN

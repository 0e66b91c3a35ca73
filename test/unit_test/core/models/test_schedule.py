"""Unit tests for the backup schedule arithmetic."""

from datetime import datetime

import pytest

from loungeos.core.models.domain import BackupFrequency, next_backup_time

LAST = datetime(2026, 1, 31, 23, 30)


@pytest.mark.parametrize(
    "frequency, expected",
    [
        (BackupFrequency.hourly, datetime(2026, 2, 1, 0, 30)),
        (BackupFrequency.daily, datetime(2026, 2, 1, 23, 30)),
        (BackupFrequency.weekly, datetime(2026, 2, 7, 23, 30)),
        (BackupFrequency.monthly, datetime(2026, 2, 28, 23, 30)),
        ("daily", datetime(2026, 2, 1, 23, 30)),
    ],
)
def test_next_backup_time(frequency, expected):
    assert next_backup_time(frequency, LAST) == expected


def test_monthly_crosses_year():
    assert next_backup_time(BackupFrequency.monthly, datetime(2026, 12, 15)) == datetime(2027, 1, 15)


def test_disabled_has_no_next_time():
    assert next_backup_time(BackupFrequency.disabled, LAST) is None


def test_unknown_frequency_rejected():
    with pytest.raises(ValueError):
        next_backup_time("yearly", LAST)

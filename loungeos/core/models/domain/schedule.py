"""Backup schedule arithmetic."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Optional

from .enums import BackupFrequency


def _add_month(moment: datetime) -> datetime:
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def next_backup_time(frequency: BackupFrequency | str, last: datetime) -> Optional[datetime]:
    """Compute when the next automatic backup is due.

    Args:
        frequency: Backup frequency
        last: Time of the reference backup (or of the settings change)

    Returns:
        The next due time, or None when backups are disabled.
    """
    frequency = BackupFrequency(frequency)
    if frequency is BackupFrequency.hourly:
        return last + timedelta(hours=1)
    if frequency is BackupFrequency.daily:
        return last + timedelta(days=1)
    if frequency is BackupFrequency.weekly:
        return last + timedelta(days=7)
    if frequency is BackupFrequency.monthly:
        return _add_month(last)
    return None

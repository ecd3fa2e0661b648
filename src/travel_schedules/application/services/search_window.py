"""Search window computation."""

from datetime import UTC, date, datetime, time, timedelta

from travel_schedules.domain.models import SearchWindow, WindowStatus

DEFAULT_LEAD_TIME = timedelta(hours=1)
DEFAULT_MAX_SEARCH_DAYS = 30


def compute_search_window(
    search_date: date,
    now: datetime,
    lead_time: timedelta = DEFAULT_LEAD_TIME,
    max_search_days: int = DEFAULT_MAX_SEARCH_DAYS,
) -> SearchWindow:
    """Compute the window in which schedules for ``search_date`` are searchable.

    Same-day searches start ``lead_time`` after ``now``. Later dates start at
    midnight in the timezone of ``now``. The window closes ``max_search_days``
    after ``now``; a date whose start lies past that point is beyond the horizon.

    Offsets are added to ``now`` in UTC so they measure elapsed time across
    daylight-saving changes. The window instants are returned in UTC.

    Args:
        search_date: Calendar date the caller asked for.
        now: Current timestamp, normally from the injected clock.
        lead_time: Minimum booking lead time for same-day searches.
        max_search_days: Look-ahead horizon in days.

    Returns:
        The window, with its status telling whether it can be searched.
    """
    today = now.date()
    now_utc = now.astimezone(UTC)
    horizon = now_utc + timedelta(days=max_search_days)

    if search_date < today:
        return SearchWindow(
            search_date=search_date,
            today=today,
            now=now,
            effective_instant=None,
            horizon=horizon,
            status=WindowStatus.PAST,
        )

    if search_date == today:
        effective_instant = now_utc + lead_time
    else:
        midnight = datetime.combine(search_date, time.min, tzinfo=now.tzinfo)
        effective_instant = midnight.astimezone(UTC)

    status = WindowStatus.BEYOND_HORIZON if effective_instant > horizon else WindowStatus.OPEN
    return SearchWindow(
        search_date=search_date,
        today=today,
        now=now,
        effective_instant=effective_instant,
        horizon=horizon,
        status=status,
    )

"""
stats_service.py — Habit statistics
Completion rate, streaks and mood/difficulty averages over a trailing window of days.
Read-only: never touches the logs it aggregates.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone

from trackstar.config import DEFAULT_STATS_DAYS
from trackstar.errors import NotFound, Unauthenticated, ValidationError
from trackstar.schemas.habit_log_schemas import HabitStats, StatsResult
from trackstar.schemas.habit_schemas import HabitSummary

logger = logging.getLogger(__name__)

MOOD_SCORES = {
    "excellent": 5,
    "good": 4,
    "okay": 3,
    "difficult": 2,
    "struggling": 1,
}


def window_bounds(window_days: int, today: date) -> tuple[datetime, datetime]:
    """
    The window is the `window_days` calendar days ending today (UTC).
    Returns [start, end) as naive UTC datetimes.
    """
    first_day = today - timedelta(days=window_days - 1)
    start = datetime.combine(first_day, time.min)
    end = datetime.combine(today + timedelta(days=1), time.min)
    return start, end


def longest_streak(days: set[date]) -> int:
    best = 0
    for d in days:
        # Only count runs from their first day
        if d - timedelta(days=1) in days:
            continue
        run = 1
        while d + timedelta(days=run) in days:
            run += 1
        best = max(best, run)
    return best


def current_streak(days: set[date], today: date) -> int:
    """Consecutive logged days ending today, or ending yesterday while today is still open."""
    cursor = today if today in days else today - timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def format_rate(logged_days: int, total_days: int) -> str:
    rate = min(logged_days / total_days, 1.0) if total_days else 0.0
    return f"{round(rate * 100, 1):g}%"


def _average(values: list) -> float | None:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def summarize_logs(logs: list, window_days: int, today: date) -> HabitStats:
    """Aggregate already-windowed logs into the stats block."""
    days = {log.completed_date.date() for log in logs}
    moods = [MOOD_SCORES[log.mood] for log in logs if log.mood in MOOD_SCORES]
    difficulties = [log.difficulty for log in logs if log.difficulty is not None]

    return HabitStats(
        total_completions=sum(log.completion_count or 1 for log in logs),
        total_days=window_days,
        completion_rate=format_rate(len(days), window_days),
        current_streak=current_streak(days, today),
        longest_streak=longest_streak(days),
        average_mood=_average(moods),
        average_difficulty=_average(difficulties),
    )


class HabitStatsService:
    def __init__(self, store):
        self.store = store

    def compute_stats(self, habit_id: str, user_id: str | None,
                      window_days: int = DEFAULT_STATS_DAYS, today: date | None = None) -> StatsResult:
        if not user_id:
            raise Unauthenticated("User not authenticated")
        if window_days < 1:
            raise ValidationError("days must be a positive integer")

        habit = self.store.find_habit(habit_id, user_id)
        if habit is None:
            raise NotFound("Habit not found")

        today = today or datetime.now(timezone.utc).date()
        start, end = window_bounds(window_days, today)
        logs = self.store.list_logs(habit_id, user_id, start, end)
        logger.debug("Computing stats for habit %s over %d days (%d logs)", habit_id, window_days, len(logs))

        return StatsResult(
            habit=HabitSummary.model_validate(habit),
            period=f"{window_days} days",
            stats=summarize_logs(logs, window_days, today),
        )

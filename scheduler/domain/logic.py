from datetime import timedelta
from .enums import Outcome
from ..config import EBBINGHAUS_INTERVAL_DAYS, FALLBACK_INTERVAL_DAYS, MAX_REVIEW_STAGE

def interval_days(stage: int) -> int:
    return EBBINGHAUS_INTERVAL_DAYS.get(stage, FALLBACK_INTERVAL_DAYS)

def next_stage(stage: int, outcome: Outcome) -> int:
    if outcome == Outcome.INCORRECT:
        return 0
    return min(stage + 1, MAX_REVIEW_STAGE)

def schedule_next(stage: int, outcome: Outcome, today):
    """
    Return (new_stage, next_review_date) for one recall.
    The interval is looked up with the new stage, and a reset is due today.
    """
    new_stage = next_stage(stage, outcome)
    if new_stage == 0:
        return new_stage, today
    return new_stage, today + timedelta(days=interval_days(new_stage))

def percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    # halves round up
    return int(100 * part / total + 0.5)

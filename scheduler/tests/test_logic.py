from datetime import date, timedelta

import pytest

from scheduler.config import EBBINGHAUS_INTERVAL_DAYS, FALLBACK_INTERVAL_DAYS, MAX_REVIEW_STAGE
from scheduler.domain.enums import Outcome
from scheduler.domain.logic import interval_days, next_stage, percentage, schedule_next

TODAY = date(2026, 3, 10)


@pytest.mark.parametrize("stage", range(MAX_REVIEW_STAGE + 1))
def test_correct_recall_advances_one_stage(stage):
    new_stage, next_date = schedule_next(stage, Outcome.CORRECT, TODAY)

    expected = min(stage + 1, MAX_REVIEW_STAGE)
    assert new_stage == expected
    assert next_date == TODAY + timedelta(days=EBBINGHAUS_INTERVAL_DAYS[expected])


@pytest.mark.parametrize("stage", range(MAX_REVIEW_STAGE + 1))
def test_incorrect_recall_resets_and_is_due_today(stage):
    assert schedule_next(stage, Outcome.INCORRECT, TODAY) == (0, TODAY)


def test_interval_uses_new_stage():
    # 0 -> 1 waits one day, not the stage-0 fallback
    _, next_date = schedule_next(0, Outcome.CORRECT, TODAY)
    assert next_date == TODAY + timedelta(days=1)


def test_stage_eight_is_a_ceiling():
    assert next_stage(MAX_REVIEW_STAGE, Outcome.CORRECT) == MAX_REVIEW_STAGE
    assert next_stage(MAX_REVIEW_STAGE, Outcome.INCORRECT) == 0


def test_interval_table():
    assert [interval_days(s) for s in range(1, 9)] == [1, 2, 4, 7, 15, 30, 60, 120]


@pytest.mark.parametrize("stage", [0, 9, 42])
def test_unmapped_stages_fall_back(stage):
    assert interval_days(stage) == FALLBACK_INTERVAL_DAYS


@pytest.mark.parametrize(
    "part,total,expected",
    [(3, 7, 43), (0, 0, 0), (5, 0, 0), (1, 8, 13), (0, 4, 0), (7, 7, 100), (2, 3, 67)],
)
def test_percentage_rounds_to_int(part, total, expected):
    rate = percentage(part, total)
    assert rate == expected
    assert isinstance(rate, int)


def test_outcome_from_flag():
    assert Outcome.from_flag(True) is Outcome.CORRECT
    assert Outcome.from_flag(False) is Outcome.INCORRECT

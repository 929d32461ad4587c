from django.db import transaction
from django.utils import timezone
import structlog
from ..data.repos import (
    find_progress,
    get_or_create_progress_for_update,
    persistence_guard,
    query_by_stage,
    query_due,
    update_progress,
)
from ..data.scopes import require_user, wordlist_word_ids
from ..domain.enums import Outcome, SelectionPhase
from ..domain.errors import InvalidInput, NotFound
from ..domain.logic import schedule_next
from ..domain.records import DueSelection, ProgressSnapshot, ReviewResult
from ..utils.time import review_today
from .cache import notify_progress_changed
from .inputs import coerce_id, coerce_limit

logger = structlog.get_logger()

def to_snapshot(progress):
    return ProgressSnapshot(
        word_id=progress.word_id,
        word_text=progress.word.text,
        review_stage=progress.review_stage,
        next_review_date=progress.next_review_date,
        last_reviewed_at=progress.last_reviewed_at,
    )

def record_outcome(user_id, word_id, is_correct=True, *, now=None):
    """
    Apply one recall outcome to the (user, word) pair and return the new state.

    A missing ``is_correct`` (None) counts as a correct recall. A pair without
    a progress row starts from stage 0. Not safe to retry blindly: a repeated
    correct outcome advances the stage twice.
    """
    user_id = coerce_id(user_id, "user_id")
    word_id = coerce_id(word_id, "word_id")
    if is_correct is None:
        is_correct = True
    if not isinstance(is_correct, bool):
        raise InvalidInput("is_correct must be a boolean", is_correct=is_correct)
    outcome = Outcome.from_flag(is_correct)
    now = now or timezone.now()
    today = review_today(now)

    logger.info("review_received",
        user_id=user_id,
        word_id=word_id,
        outcome=outcome.name.lower(),
    )

    # Row lock serializes concurrent outcomes for the same pair
    with persistence_guard("record_outcome"), transaction.atomic():
        require_user(user_id)
        progress, created = get_or_create_progress_for_update(user_id, word_id, today)
        previous_stage = progress.review_stage
        stage, next_date = schedule_next(previous_stage, outcome, today)
        update_progress(progress, stage, next_date, now)

    notify_progress_changed(user_id, [word_id])

    logger.info("review_recorded",
        user_id=user_id,
        word_id=word_id,
        created=created,
        previous_stage=previous_stage,
        review_stage=stage,
        next_review_date=next_date.isoformat(),
    )

    return ReviewResult(
        word_id=word_id,
        review_stage=stage,
        next_review_date=next_date,
        last_reviewed_at=now,
    )

def get_progress(user_id, word_id):
    user_id = coerce_id(user_id, "user_id")
    word_id = coerce_id(word_id, "word_id")
    with persistence_guard("get_progress"):
        require_user(user_id)
        progress = find_progress(user_id, word_id)
    if progress is None:
        raise NotFound(f"No review progress for word {word_id}", word_id=word_id)
    return to_snapshot(progress)

def select_new_words(user_id, limit, word_ids=None):
    """Stage-0 words, oldest assignment first, whatever their due date."""
    rows = query_by_stage(user_id, 0, limit, word_ids=word_ids)
    return DueSelection(SelectionPhase.NEW, [to_snapshot(p) for p in rows])

def select_overdue_words(user_id, today, limit, word_ids=None):
    """Words due today or earlier, most overdue first."""
    rows = query_due(user_id, today, limit, word_ids=word_ids)
    return DueSelection(SelectionPhase.REVIEW, [to_snapshot(p) for p in rows])

def select_due(user_id, wordlist_id=None, limit=None, new_only=False, *, now=None):
    user_id = coerce_id(user_id, "user_id")
    limit = coerce_limit(limit)
    if new_only is None:
        new_only = False
    if not isinstance(new_only, bool):
        raise InvalidInput("new_only must be a boolean", new_only=new_only)
    today = review_today(now)

    with persistence_guard("select_due"):
        require_user(user_id)
        word_ids = None
        if wordlist_id is not None:
            word_ids = wordlist_word_ids(user_id, coerce_id(wordlist_id, "wordlist_id"))

        selection = DueSelection(SelectionPhase.NEW)
        if new_only:
            selection = select_new_words(user_id, limit, word_ids=word_ids)
        if not selection.items:
            selection = select_overdue_words(user_id, today, limit, word_ids=word_ids)

    logger.info("due_selected",
        user_id=user_id,
        wordlist_id=wordlist_id,
        new_only=new_only,
        phase=selection.phase.value,
        count=selection.count,
    )
    return selection

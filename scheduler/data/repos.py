from contextlib import contextmanager

from django.db import DatabaseError, transaction
from django.db.models import Count

from vocabulary.models import Word
from ..domain.errors import NotFound, PersistenceFailure
from .models import ReviewProgress

@contextmanager
def persistence_guard(operation):
    """
    Translate storage failures into PersistenceFailure.
    Place it outside transaction.atomic() so commit-time errors are covered too.
    """
    try:
        yield
    except DatabaseError as exc:
        raise PersistenceFailure(f"{operation} failed: {exc}", operation=operation) from exc

def _scoped(qs, word_ids):
    # None means every word the user has; an empty collection matches nothing
    if word_ids is not None:
        qs = qs.filter(word_id__in=list(word_ids))
    return qs

def find_progress(user_id, word_id):
    return (ReviewProgress.objects
            .select_related("word")
            .filter(user_id=user_id, word_id=word_id)
            .first())

def existing_word_ids(word_ids):
    return set(Word.objects.filter(pk__in=list(word_ids)).values_list("pk", flat=True))

def get_or_create_progress_for_update(user_id, word_id, today):
    """
    Fetch the progress row and lock it until the surrounding transaction ends.
    Create it at stage 0, due today, if missing. Must run inside transaction.atomic().
    """
    if not Word.objects.filter(pk=word_id).exists():
        raise NotFound(f"Word {word_id} does not exist", word_id=word_id)
    return (ReviewProgress.objects
            .select_for_update()
            .get_or_create(
                user_id=user_id, word_id=word_id,
                defaults={"review_stage": 0, "next_review_date": today},
            ))

def update_progress(progress, review_stage, next_review_date, last_reviewed_at):
    progress.review_stage = review_stage
    progress.next_review_date = next_review_date
    progress.last_reviewed_at = last_reviewed_at
    progress.save(update_fields=[
        "review_stage", "next_review_date", "last_reviewed_at", "updated_at",
    ])
    return progress

def query_due(user_id, max_next_review_date, limit, word_ids=None):
    qs = ReviewProgress.objects.select_related("word").filter(
        user_id=user_id, next_review_date__lte=max_next_review_date
    )
    return list(_scoped(qs, word_ids).order_by("next_review_date", "id")[:limit])

def query_by_stage(user_id, stage, limit, word_ids=None):
    qs = ReviewProgress.objects.select_related("word").filter(
        user_id=user_id, review_stage=stage
    )
    return list(_scoped(qs, word_ids).order_by("created_at", "id")[:limit])

def count_progress(user_id, word_ids=None, **conditions):
    qs = ReviewProgress.objects.filter(user_id=user_id, **conditions)
    return _scoped(qs, word_ids).count()

def group_count_by_stage(user_id, word_ids=None):
    rows = (_scoped(ReviewProgress.objects.filter(user_id=user_id), word_ids)
            .values("review_stage")
            .annotate(count=Count("id"))
            .order_by())
    return {row["review_stage"]: row["count"] for row in rows}

def tracked_word_ids(user_id, word_ids):
    return set(ReviewProgress.objects
               .filter(user_id=user_id, word_id__in=list(word_ids))
               .values_list("word_id", flat=True))

def bulk_create_if_absent(user_id, word_ids, today):
    """
    Create a stage-0, due-today row for every word the user is not tracking yet.
    Rows that already exist, or that a concurrent call creates first, are skipped.
    Returns how many rows this call created.
    """
    wanted = set(word_ids)
    if not wanted:
        return 0
    existing = tracked_word_ids(user_id, wanted)
    created_count = 0
    with transaction.atomic():
        for word_id in sorted(wanted - existing):
            _, created = ReviewProgress.objects.get_or_create(
                user_id=user_id, word_id=word_id,
                defaults={"review_stage": 0, "next_review_date": today},
            )
            created_count += int(created)
    return created_count

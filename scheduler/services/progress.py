import structlog
from ..config import MAX_REVIEW_STAGE
from ..data.repos import (
    bulk_create_if_absent,
    count_progress,
    existing_word_ids,
    group_count_by_stage,
    persistence_guard,
)
from ..data.scopes import (
    owned_word_ids,
    require_user,
    user_wordlist_ids,
    wordlist_word_ids,
)
from ..domain.errors import NotFound
from ..domain.logic import percentage
from ..domain.records import InitializationStatus, ProgressStats
from ..utils.time import review_today
from .cache import get_cached_stats, notify_progress_changed, store_stats
from .inputs import coerce_id

logger = structlog.get_logger()

def get_progress_stats(user_id, wordlist_id=None, *, now=None):
    """
    Aggregate counts over the user's progress rows, optionally limited to one wordlist.
    Results for the current moment are served from the stats cache when present.
    """
    user_id = coerce_id(user_id, "user_id")
    if wordlist_id is not None:
        wordlist_id = coerce_id(wordlist_id, "wordlist_id")

    with persistence_guard("get_progress_stats"):
        require_user(user_id)
        word_ids = None
        if wordlist_id is not None:
            word_ids = wordlist_word_ids(user_id, wordlist_id)

        # pinned clocks bypass the cache
        if now is None:
            cached = get_cached_stats(user_id, wordlist_id)
            if cached is not None:
                return cached

        today = review_today(now)
        total = count_progress(user_id, word_ids)
        due = count_progress(user_id, word_ids, next_review_date__lte=today)
        learned = count_progress(user_id, word_ids, review_stage__gt=0)
        by_stage = group_count_by_stage(user_id, word_ids)

    stats = ProgressStats(
        total_words=total,
        due_words=due,
        learned_words=learned,
        completion_rate=percentage(learned, total),
        stage_stats={stage: by_stage.get(stage, 0) for stage in range(MAX_REVIEW_STAGE + 1)},
    )
    if now is None:
        store_stats(user_id, wordlist_id, stats)
    return stats

def initialize_progress(user_id, word_ids, *, now=None):
    """
    Start tracking ``word_ids`` for the user at stage 0, due today.
    Already tracked words are skipped; returns the number of rows created.
    """
    user_id = coerce_id(user_id, "user_id")
    wanted = {coerce_id(word_id, "word_id") for word_id in word_ids}
    if not wanted:
        return 0
    today = review_today(now)

    with persistence_guard("initialize_progress"):
        require_user(user_id)
        missing = wanted - existing_word_ids(wanted)
        if missing:
            raise NotFound(
                f"Unknown word ids: {sorted(missing)}", word_ids=sorted(missing)
            )
        created = bulk_create_if_absent(user_id, wanted, today)

    if created:
        notify_progress_changed(user_id, wanted)

    logger.info("progress_initialized",
        user_id=user_id,
        requested=len(wanted),
        created=created,
    )
    return created

def initialize_wordlists(user_id, wordlist_id=None, *, now=None):
    """Initialize progress for one owned wordlist, or for every wordlist of the user."""
    user_id = coerce_id(user_id, "user_id")
    with persistence_guard("initialize_wordlists"):
        require_user(user_id)
        if wordlist_id is not None:
            word_ids = wordlist_word_ids(user_id, coerce_id(wordlist_id, "wordlist_id"))
        else:
            if not user_wordlist_ids(user_id):
                raise NotFound("No wordlists found for this user", user_id=user_id)
            word_ids = owned_word_ids(user_id)
    return initialize_progress(user_id, word_ids, now=now)

def initialization_status(user_id, wordlist_id=None):
    user_id = coerce_id(user_id, "user_id")
    with persistence_guard("initialization_status"):
        require_user(user_id)
        if wordlist_id is not None:
            word_ids = wordlist_word_ids(user_id, coerce_id(wordlist_id, "wordlist_id"))
        else:
            word_ids = owned_word_ids(user_id)
        initialized = count_progress(user_id, word_ids)
        new = count_progress(user_id, word_ids, review_stage=0)

    total = len(word_ids)
    return InitializationStatus(
        total_words=total,
        initialized_words=initialized,
        new_words=new,
        is_fully_initialized=total > 0 and initialized == total,
        initialization_rate=percentage(initialized, total),
    )

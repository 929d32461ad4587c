from django.conf import settings
from django.core.cache import cache
import structlog

from ..config import GLOBAL_SCOPE, STATS_CACHE_PREFIX
from ..data.scopes import wordlists_containing
from ..domain.errors import CacheInvalidationFailure

logger = structlog.get_logger()

def stats_cache_key(user_id, wordlist_id=None):
    scope = GLOBAL_SCOPE if wordlist_id is None else wordlist_id
    return f"{STATS_CACHE_PREFIX}:{user_id}:{scope}"

def get_cached_stats(user_id, wordlist_id=None):
    try:
        return cache.get(stats_cache_key(user_id, wordlist_id))
    except Exception as exc:
        logger.warning("stats_cache_read_failed", user_id=user_id, wordlist_id=wordlist_id, error=str(exc))
        return None

def store_stats(user_id, wordlist_id, stats):
    try:
        cache.set(stats_cache_key(user_id, wordlist_id), stats, settings.SRS_STATS_CACHE_TTL)
    except Exception as exc:
        logger.warning("stats_cache_write_failed", user_id=user_id, wordlist_id=wordlist_id, error=str(exc))

def invalidate_stats(user_id, word_ids):
    """
    Drop the user-global stats entry and the entry of every wordlist
    of the user holding one of ``word_ids``.
    """
    try:
        wordlist_ids = wordlists_containing(user_id, word_ids)
        keys = [stats_cache_key(user_id)]
        keys += [stats_cache_key(user_id, wid) for wid in sorted(wordlist_ids)]
        cache.delete_many(keys)
    except Exception as exc:
        raise CacheInvalidationFailure(
            f"Could not invalidate stats for user {user_id}: {exc}", user_id=user_id
        ) from exc
    return keys

def notify_progress_changed(user_id, word_ids):
    """Best-effort invalidation. Failures are logged, never raised."""
    try:
        keys = invalidate_stats(user_id, word_ids)
    except CacheInvalidationFailure as exc:
        logger.warning("stats_cache_invalidation_failed",
            user_id=user_id,
            error=exc.message,
        )
        return False
    logger.debug("stats_cache_invalidated", user_id=user_id, keys=keys)
    return True

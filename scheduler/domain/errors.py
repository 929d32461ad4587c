class SchedulerError(Exception):
    """Base class for failures the review scheduler reports to its caller."""

    code = "scheduler_error"

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInput(SchedulerError):
    """Malformed identifier or out-of-range parameter."""

    code = "invalid_input"


class NotFound(SchedulerError):
    """Referenced word, progress record or wordlist does not exist."""

    code = "not_found"


class Forbidden(SchedulerError):
    """Wordlist exists but belongs to another user."""

    code = "forbidden"


class PersistenceFailure(SchedulerError):
    """Storage failed; the caller decides whether to retry."""

    code = "persistence_failure"


class CacheInvalidationFailure(SchedulerError):
    code = "cache_invalidation_failure"

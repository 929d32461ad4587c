MAX_REVIEW_STAGE = 8
FALLBACK_INTERVAL_DAYS = 120
EBBINGHAUS_INTERVAL_DAYS = {
    1: 1,      # first correct recall
    2: 2,
    3: 4,
    4: 7,
    5: 15,
    6: 30,
    7: 60,
    8: 120,    # ceiling, repeats while recall stays correct
}
DEFAULT_DUE_LIMIT = 50
MAX_DUE_LIMIT = 500

STATS_CACHE_PREFIX = "review-stats"
GLOBAL_SCOPE = "all"

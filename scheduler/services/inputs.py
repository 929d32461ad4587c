from ..config import DEFAULT_DUE_LIMIT, MAX_DUE_LIMIT
from ..domain.errors import InvalidInput

def coerce_id(value, name):
    """Accept a positive integer or its decimal string form."""
    if isinstance(value, bool) or value is None:
        raise InvalidInput(f"Invalid {name}", **{name: value})
    try:
        ident = int(str(value).strip())
    except ValueError:
        raise InvalidInput(f"Invalid {name}", **{name: value}) from None
    if ident <= 0:
        raise InvalidInput(f"Invalid {name}", **{name: value})
    return ident

def coerce_limit(limit):
    if limit is None:
        return DEFAULT_DUE_LIMIT
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidInput("limit must be an integer", limit=limit)
    if not 1 <= limit <= MAX_DUE_LIMIT:
        raise InvalidInput(f"limit must be between 1 and {MAX_DUE_LIMIT}", limit=limit)
    return limit

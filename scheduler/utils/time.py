from django.utils import timezone

def review_today(now=None):
    """Calendar day (in settings.TIME_ZONE) that ``now`` falls on."""
    return timezone.localdate(now or timezone.now())

def to_local_iso(dt):
    if dt is None:
        return None
    return timezone.localtime(dt).isoformat()

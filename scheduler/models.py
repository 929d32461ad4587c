# Django discovers models through <app>.models
from .data.models import ReviewProgress  # noqa: F401

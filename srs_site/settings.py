import os
from pathlib import Path

from srs_site.logging_config import configure_logging

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("SRS_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = env_bool("SRS_DEBUG", False)
ALLOWED_HOSTS = [h for h in os.environ.get("SRS_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "vocabulary",
    "scheduler",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "srs_site.urls"
WSGI_APPLICATION = "srs_site.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("SRS_DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "review-stats",
    }
}

AUTH_USER_MODEL = "vocabulary.User"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("SRS_TIME_ZONE", "UTC")
USE_I18N = False
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "vocabulary.authentication.TokenHeaderAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "scheduler.api.exceptions.scheduler_exception_handler",
}

SRS_STATS_CACHE_TTL = int(os.environ.get("SRS_STATS_CACHE_TTL", 300))
SRS_LOG_LEVEL = os.environ.get("SRS_LOG_LEVEL", "INFO")

configure_logging(SRS_LOG_LEVEL)

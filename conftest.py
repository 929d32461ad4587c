import importlib

import pytest
from django.core.cache import cache
from django.urls import clear_url_caches
from rest_framework.test import APIClient

from vocabulary.models import User, Word, Wordlist, WordlistEntry

WORD_TEXTS = ["abandon", "benevolent", "candid", "diligent", "eloquent", "frugal", "gregarious"]


def make_wordlist(user, name, words):
    wordlist = Wordlist.objects.create(user=user, name=name)
    for word in words:
        WordlistEntry.objects.create(wordlist=wordlist, word=word)
    return wordlist


@pytest.fixture(autouse=True)
def clear_stats_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def learner(db):
    return User.objects.create_user("learner", token="token-learner")


@pytest.fixture
def other_learner(db):
    return User.objects.create_user("other", token="token-other")


@pytest.fixture
def words(db):
    return [Word.objects.create(text=text) for text in WORD_TEXTS]


@pytest.fixture
def wordlist_factory(db):
    return make_wordlist


@pytest.fixture
def wordlist(learner, words):
    return make_wordlist(learner, "starter", words[:3])


@pytest.fixture
def api_client(learner):
    client = APIClient()
    client.credentials(HTTP_X_USER_TOKEN=learner.token)
    return client


@pytest.fixture
def demo_routes(settings):
    """Rebuild the URLconf with DEBUG on so development-only routes exist."""
    import srs_site.urls

    settings.DEBUG = True
    importlib.reload(srs_site.urls)
    clear_url_caches()
    yield
    settings.DEBUG = False
    importlib.reload(srs_site.urls)
    clear_url_caches()

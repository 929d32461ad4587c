import pytest
import requests
import logging
from datetime import date, timedelta

BASE_URL = "http://127.0.0.1:8000/api"
TOKEN = "token-testuser1"
logger = logging.getLogger(__name__)

def headers():
    return {"X-User-Token": TOKEN}


@pytest.fixture(scope="module")
def seeded():
    """Reset the live server to the built-in demo learners and wordlists."""
    r = requests.post(f"{BASE_URL}/initialize-data", json={})
    assert r.status_code == 200
    me = requests.get(f"{BASE_URL}/users/me/", headers=headers()).json()
    return {wl["name"]: wl["id"] for wl in me["wordlists"]}


def post_outcome(word_id, is_correct=None):
    """Helper for POST /review/progress/{word_id}"""
    payload = {} if is_correct is None else {"is_correct": is_correct}
    r = requests.post(f"{BASE_URL}/review/progress/{word_id}", json=payload, headers=headers())
    data = r.json()
    logger.info(
        "POST /review/progress/%s is_correct=%s → status=%s stage=%s next=%s",
        word_id,
        is_correct,
        r.status_code,
        data.get("new_review_stage"),
        data.get("next_review_date"),
    )
    return r


def get_due(**params):
    """Helper for GET /review/due"""
    r = requests.get(f"{BASE_URL}/review/due", params=params, headers=headers())
    data = r.json()
    logger.info(
        "GET /review/due params=%s → status=%s phase=%s count=%s",
        params,
        r.status_code,
        data.get("phase"),
        data.get("count"),
    )
    return r


@pytest.mark.integration
def test_initialize_then_learn_new_words_live(seeded):
    """Initialized words come back first in new mode"""
    starter = seeded["starter"]
    r = requests.post(f"{BASE_URL}/learning/initialize", json={"wordlist_id": starter}, headers=headers())
    assert r.json()["initialized_count"] == 5

    d = get_due(wordlist_id=starter, new_mode="true").json()
    assert d["phase"] == "new"
    assert d["count"] == 5
    logger.info("✓ Passed: new mode returns initialized words")


@pytest.mark.integration
def test_outcome_cycle_live(seeded):
    """correct → stage 1, wrong → stage 0, no flag → stage 1"""
    word_id = get_due(wordlist_id=seeded["starter"], new_mode="true").json()["items"][0]["word_id"]

    d1 = post_outcome(word_id, True).json()
    d2 = post_outcome(word_id, False).json()
    d3 = post_outcome(word_id).json()

    assert [d1["new_review_stage"], d2["new_review_stage"], d3["new_review_stage"]] == [1, 0, 1]
    assert date.fromisoformat(d1["next_review_date"]) - date.fromisoformat(d2["next_review_date"]) == timedelta(days=1)
    logger.info("✓ Passed: outcome cycle")


@pytest.mark.integration
def test_stats_live(seeded):
    r = requests.get(f"{BASE_URL}/review/stats", params={"wordlist_id": seeded["starter"]}, headers=headers())
    stats = r.json()["stats"]
    assert stats["total_words"] == 5
    assert stats["completion_rate"] == round(100 * stats["learned_words"] / 5)
    logger.info("✓ Passed: stats %s", stats)

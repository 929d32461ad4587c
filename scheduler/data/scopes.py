from django.contrib.auth import get_user_model

from vocabulary.models import Wordlist, WordlistEntry
from ..domain.errors import Forbidden, NotFound

def require_user(user_id):
    if not get_user_model().objects.filter(pk=user_id).exists():
        raise NotFound(f"User {user_id} does not exist", user_id=user_id)

def resolve_wordlist(user_id, wordlist_id):
    wordlist = Wordlist.objects.filter(pk=wordlist_id).first()
    if wordlist is None:
        raise NotFound(f"Wordlist {wordlist_id} does not exist", wordlist_id=wordlist_id)
    if wordlist.user_id != user_id:
        raise Forbidden(
            f"Wordlist {wordlist_id} belongs to another user", wordlist_id=wordlist_id
        )
    return wordlist

def wordlist_word_ids(user_id, wordlist_id):
    """Word ids of one wordlist, after checking the user owns it."""
    resolve_wordlist(user_id, wordlist_id)
    return set(WordlistEntry.objects
               .filter(wordlist_id=wordlist_id)
               .values_list("word_id", flat=True))

def user_wordlist_ids(user_id):
    return list(Wordlist.objects
                .filter(user_id=user_id)
                .order_by("created_at", "id")
                .values_list("id", flat=True))

def wordlists_containing(user_id, word_ids):
    return set(WordlistEntry.objects
               .filter(wordlist__user_id=user_id, word_id__in=list(word_ids))
               .values_list("wordlist_id", flat=True))

def owned_word_ids(user_id):
    """Distinct word ids across every wordlist the user owns."""
    return set(WordlistEntry.objects
               .filter(wordlist__user_id=user_id)
               .values_list("word_id", flat=True)
               .distinct())

import secrets

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils import timezone


def generate_token():
    return secrets.token_hex(20)


class User(AbstractUser):
    """
    Learner account. API clients identify themselves with ``token``
    sent in the X-User-Token header.
    """

    token = models.CharField(max_length=64, unique=True, default=generate_token)


class Word(models.Model):
    text = models.CharField(max_length=128, unique=True)
    definition_data = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return self.text


class Wordlist(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="wordlists")
    name = models.CharField(max_length=128)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)
    words = models.ManyToManyField(Word, through="WordlistEntry", related_name="wordlists")

    class Meta:
        unique_together = (("user", "name"),)

    def __str__(self):
        return self.name


class WordlistEntry(models.Model):
    wordlist = models.ForeignKey(Wordlist, on_delete=models.CASCADE, related_name="entries")
    word = models.ForeignKey(Word, on_delete=models.CASCADE, related_name="entries")

    class Meta:
        unique_together = (("wordlist", "word"),)

import json
import os
from django.core.management.base import BaseCommand
from django.db import transaction
from vocabulary.models import User, Word, Wordlist, WordlistEntry

DEMO_WORDLISTS = {
    "starter": ["abandon", "benevolent", "candid", "diligent", "eloquent"],
    "advanced": ["ephemeral", "gregarious", "obfuscate", "candid", "ubiquitous"],
}


class Command(BaseCommand):
    help = "Reset learners and load demo words and wordlists"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file",
            default=None,
            help='JSON file ({"wordlist name": ["word", ...]}) to load wordlists from',
        )

    def handle(self, *args, **options):
        User.objects.all().delete()

        self.stdout.write(self.style.SUCCESS("All existing learner data has been deleted"))

        file_name = options.get("file")
        try:
            if file_name:
                json_file_path = file_name
                if not os.path.isabs(json_file_path):
                    json_file_path = os.path.join(os.path.dirname(__file__), file_name)
                with open(json_file_path) as json_file:
                    wordlists = json.load(json_file)
            else:
                wordlists = DEMO_WORDLISTS

            with transaction.atomic():
                User.objects.create_superuser(
                    "testuser",
                    email="testuser@example.com",
                    password="testpassword",
                    token="token-testuser",
                )
                for i in range(1, 6):
                    user = User.objects.create_user(
                        f"testuser{i}",
                        email=f"testuser{i}@example.com",
                        password="testpassword",
                        token=f"token-testuser{i}",
                    )
                    for name, texts in wordlists.items():
                        wordlist = Wordlist.objects.create(user=user, name=name)
                        for text in texts:
                            word, _ = Word.objects.get_or_create(text=text.strip().lower())
                            WordlistEntry.objects.get_or_create(wordlist=wordlist, word=word)

            self.stdout.write(
                self.style.SUCCESS(
                    f"Mock data loaded successfully from {file_name or 'built-in words'}"
                )
            )
        except Exception as e:
            self.stdout.write(self.style.ERROR(f"Error loading data: {e}"))
            raise

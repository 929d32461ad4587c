import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("vocabulary", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ReviewProgress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("review_stage", models.PositiveSmallIntegerField(default=0)),
                ("next_review_date", models.DateField(default=django.utils.timezone.localdate)),
                ("last_reviewed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_progress", to=settings.AUTH_USER_MODEL)),
                ("word", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_progress", to="vocabulary.word")),
            ],
            options={
                "db_table": "scheduler_review_progress",
                "indexes": [
                    models.Index(fields=["user", "next_review_date"], name="progress_user_due_idx"),
                    models.Index(fields=["user", "review_stage", "created_at"], name="progress_user_stage_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(review_stage__lte=8), name="review_stage_within_table"),
                ],
                "unique_together": {("user", "word")},
            },
        ),
    ]

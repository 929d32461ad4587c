from django.conf import settings
from django.db import models
from django.utils import timezone

from ..config import MAX_REVIEW_STAGE

class ReviewProgress(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="review_progress"
    )
    word = models.ForeignKey(
        "vocabulary.Word", on_delete=models.CASCADE, related_name="review_progress"
    )
    review_stage = models.PositiveSmallIntegerField(default=0)
    next_review_date = models.DateField(default=timezone.localdate)
    last_reviewed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "scheduler_review_progress"
        unique_together = (("user", "word"),)
        indexes = [
            models.Index(fields=["user", "next_review_date"], name="progress_user_due_idx"),
            models.Index(fields=["user", "review_stage", "created_at"], name="progress_user_stage_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(review_stage__lte=MAX_REVIEW_STAGE),
                name="review_stage_within_table",
            ),
        ]

    def __str__(self):
        return f"{self.user_id}:{self.word_id}@{self.review_stage}"

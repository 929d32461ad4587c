from django.urls import path
from .views import DueWordsView, InitializeProgressView, ProgressStatsView, ReviewProgressView

urlpatterns = [
    path("review/progress/<str:word_id>", ReviewProgressView.as_view(), name="review-progress"),
    path("review/due", DueWordsView.as_view(), name="review-due"),
    path("review/stats", ProgressStatsView.as_view(), name="review-stats"),
    path("learning/initialize", InitializeProgressView.as_view(), name="learning-initialize"),
]

from dataclasses import asdict

from rest_framework import views, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
import structlog
import uuid
from ..domain.enums import OUTCOME_LABELS, Outcome
from ..services.progress import (
    get_progress_stats,
    initialization_status,
    initialize_progress,
    initialize_wordlists,
)
from ..services.reviews import get_progress, record_outcome, select_due
from ..utils.time import to_local_iso
from .serializers import (
    DueQuerySerializer,
    InitializeInSerializer,
    ReviewOutcomeInSerializer,
    ScopeQuerySerializer,
)

base_logger = structlog.get_logger()


def bind_request_logger(request):
    # Create a unique request_id
    return base_logger.bind(request_id=str(uuid.uuid4()), user_id=request.user.pk)


class SchedulerAPIView(views.APIView):
    permission_classes = [IsAuthenticated]


class ReviewProgressView(SchedulerAPIView):
    def post(self, request, word_id):
        logger = bind_request_logger(request)

        s = ReviewOutcomeInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        is_correct = s.validated_data["is_correct"]

        result = record_outcome(request.user.pk, word_id, is_correct)

        logger.info(
            "review_api_response",
            word_id=result.word_id,
            is_correct=is_correct,
            time_spent=s.validated_data.get("time_spent"),
            review_stage=result.review_stage,
            next_review_date=result.next_review_date.isoformat(),
        )

        return Response(
            {
                "success": True,
                "word_id": result.word_id,
                "new_review_stage": result.review_stage,
                "next_review_date": result.next_review_date.isoformat(),
                "outcome": OUTCOME_LABELS[Outcome.from_flag(is_correct)],
            },
            status=status.HTTP_200_OK,
        )

    def get(self, request, word_id):
        snapshot = get_progress(request.user.pk, word_id)
        return Response(
            {
                "success": True,
                "progress": {
                    "word_id": snapshot.word_id,
                    "word_text": snapshot.word_text,
                    "review_stage": snapshot.review_stage,
                    "next_review_date": snapshot.next_review_date.isoformat(),
                    "last_reviewed_at": to_local_iso(snapshot.last_reviewed_at),
                },
            }
        )


class DueWordsView(SchedulerAPIView):
    def get(self, request):
        logger = bind_request_logger(request)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        wordlist_id = qs.validated_data.get("wordlist_id")

        selection = select_due(
            request.user.pk,
            wordlist_id=wordlist_id,
            limit=qs.validated_data["limit"],
            new_only=qs.validated_data["new_mode"],
        )

        logger.info(
            "due_words_api_response",
            wordlist_id=wordlist_id,
            phase=selection.phase.value,
            count=selection.count,
        )

        return Response(
            {
                "success": True,
                "phase": selection.phase.value,
                "words": selection.words,
                "items": [
                    {
                        "word_id": item.word_id,
                        "word_text": item.word_text,
                        "review_stage": item.review_stage,
                        "next_review_date": item.next_review_date.isoformat(),
                    }
                    for item in selection.items
                ],
                "count": selection.count,
            }
        )


class ProgressStatsView(SchedulerAPIView):
    def get(self, request):
        qs = ScopeQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        stats = get_progress_stats(request.user.pk, qs.validated_data.get("wordlist_id"))
        payload = asdict(stats)
        # JSON object keys are strings
        payload["stage_stats"] = {str(k): v for k, v in stats.stage_stats.items()}
        return Response({"success": True, "stats": payload})


class InitializeProgressView(SchedulerAPIView):
    def post(self, request):
        logger = bind_request_logger(request)

        s = InitializeInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        if "word_ids" in s.validated_data:
            created = initialize_progress(request.user.pk, s.validated_data["word_ids"])
        else:
            created = initialize_wordlists(request.user.pk, s.validated_data.get("wordlist_id"))

        logger.info("initialize_api_response", initialized_count=created)

        return Response(
            {
                "success": True,
                "message": f"Successfully initialized learning progress for {created} words",
                "initialized_count": created,
            }
        )

    def get(self, request):
        qs = ScopeQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        status_ = initialization_status(request.user.pk, qs.validated_data.get("wordlist_id"))
        return Response({"success": True, "status": asdict(status_)})

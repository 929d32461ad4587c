from rest_framework import serializers

from ..config import DEFAULT_DUE_LIMIT, MAX_DUE_LIMIT

class ReviewOutcomeInSerializer(serializers.Serializer):
    # absent means a correct recall
    is_correct = serializers.BooleanField(required=False, default=True)
    time_spent = serializers.IntegerField(required=False, min_value=0)

class DueQuerySerializer(serializers.Serializer):
    wordlist_id = serializers.IntegerField(required=False, min_value=1)
    limit = serializers.IntegerField(
        required=False, min_value=1, max_value=MAX_DUE_LIMIT, default=DEFAULT_DUE_LIMIT
    )
    new_mode = serializers.BooleanField(required=False, default=False)

class ScopeQuerySerializer(serializers.Serializer):
    wordlist_id = serializers.IntegerField(required=False, min_value=1)

class InitializeInSerializer(serializers.Serializer):
    wordlist_id = serializers.IntegerField(required=False, min_value=1)
    word_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False, allow_empty=False
    )

    def validate(self, attrs):
        if "wordlist_id" in attrs and "word_ids" in attrs:
            raise serializers.ValidationError("Pass either wordlist_id or word_ids, not both.")
        return attrs

from rest_framework import authentication, exceptions

from vocabulary.models import User

import structlog

logger = structlog.get_logger()

TOKEN_HEADER = "X-User-Token"


class TokenHeaderAuthentication(authentication.BaseAuthentication):
    """Resolve the learner from the X-User-Token header."""

    def authenticate(self, request):
        token = request.headers.get(TOKEN_HEADER)
        if not token:
            return None
        try:
            user = User.objects.get(token=token, is_active=True)
        except User.DoesNotExist:
            logger.info("token_login_rejected")
            raise exceptions.AuthenticationFailed("User not found or invalid credentials.")
        logger.info("token_login", user_id=user.pk, username=user.username)
        return user, token

    def authenticate_header(self, request):
        return TOKEN_HEADER

# ============================================
# board/services/guard.py
# ============================================
import logging
from typing import Optional

from django.conf import settings
from django.core.cache import cache

from board.exceptions import CreateInFlight

logger = logging.getLogger(__name__)

CLIENT_ID_HEADER = 'HTTP_X_CLIENT_ID'


class CreateGuard:
    """
    One issue create in flight per client.

    ``cache.add`` only succeeds when the key is absent, so a second submit
    arriving before the first finishes is rejected without a write. The key
    is always released on exit, success or failure. Without a client id
    there is nothing to tell submits apart and the guard does nothing.
    """

    CACHE_PREFIX = "issue-create"

    def __init__(self, client_id: Optional[str]):
        self.cache_key = f"{self.CACHE_PREFIX}:{client_id}" if client_id else None
        self.ttl = getattr(settings, 'ISSUE_CREATE_GUARD_TTL', 30)

    def __enter__(self):
        if self.cache_key is None:
            return self
        if not cache.add(self.cache_key, 1, self.ttl):
            logger.info("[issue] create rejected, already in flight: %s", self.cache_key)
            raise CreateInFlight()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.cache_key is not None:
            cache.delete(self.cache_key)
        return False


def client_id_for(request, create_session: bool = False) -> Optional[str]:
    """
    Identify the submitting client.

    An explicit ``X-Client-Id`` header wins, then the session key. With
    ``create_session`` a browser without a session gets one, so its next
    submit carries the same id. Returns None when the client is anonymous.
    """
    header = (request.META.get(CLIENT_ID_HEADER) or '').strip()
    if header:
        return header

    session = getattr(request, 'session', None)
    if session is None:
        return None
    if not session.session_key and create_session:
        session.save()
        session.modified = True
    return session.session_key or None

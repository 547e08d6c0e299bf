"""Developer-tools collector of requests that hit missing translations.

Only instantiated when DEV_TOOLS_ENABLED is set. Each request gets a short
token; if the translator reports a missing message during the request, the
token is kept (with the missing keys) so the grid can list it.
"""

import logging
from collections import deque
from datetime import datetime
from uuid import uuid4

from flask import g, has_request_context, request

logger = logging.getLogger(__name__)


class TokenFinder:
    """Keeps the most recent request tokens that reported missing translations."""

    def __init__(self, limit=10):
        self.limit = limit
        self._tokens = deque(maxlen=limit)

    def init_app(self, app):
        app.before_request(self.start_request)
        app.after_request(self.end_request)

    def start_request(self):
        g.translation_token = uuid4().hex[:6]
        g.missing_translations = []

    def record_missing(self, locale, domain, key):
        """Translator callback; ignored outside a request."""
        if not has_request_context() or 'missing_translations' not in g:
            return
        entry = {'locale': locale, 'domain': domain, 'key': key}
        if entry not in g.missing_translations:
            g.missing_translations.append(entry)

    def end_request(self, response):
        missing = g.get('missing_translations')
        if missing:
            self._tokens.appendleft({
                'token': g.translation_token,
                'ip': request.remote_addr,
                'method': request.method,
                'url': request.url,
                'time': datetime.utcnow().isoformat(),
                'missing': list(missing),
            })
            logger.debug(f"Request {g.translation_token} reported {len(missing)} missing translation(s)")
        return response

    def find(self):
        """Return recorded tokens, newest first."""
        return list(self._tokens)

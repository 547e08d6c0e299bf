"""CSRF token helpers for asynchronous admin actions.

Tokens are short-lived JWTs signed with the app SECRET_KEY. Pages embed a
token and scripts send it back in the X-CSRF-Token header (or a `_token`
form field).
"""

from datetime import datetime, timedelta

import jwt
from flask import current_app, request

from translation_admin.exceptions import CsrfTokenInvalid

CSRF_PURPOSE = 'translation-admin'


def generate_csrf_token():
    """Create a signed token for the current app."""
    expires = datetime.utcnow() + timedelta(seconds=current_app.config['CSRF_TOKEN_EXPIRES'])
    payload = {'purpose': CSRF_PURPOSE, 'exp': expires}
    return jwt.encode(payload, current_app.config['SECRET_KEY'], algorithm='HS256')


def check_csrf():
    """Raise CsrfTokenInvalid unless the request carries a valid token."""
    token = request.headers.get('X-CSRF-Token') or request.form.get('_token')

    if not token:
        raise CsrfTokenInvalid('CSRF token is missing')

    try:
        payload = jwt.decode(token, current_app.config['SECRET_KEY'], algorithms=['HS256'])
    except jwt.ExpiredSignatureError:
        raise CsrfTokenInvalid('CSRF token has expired')
    except jwt.InvalidTokenError:
        raise CsrfTokenInvalid('CSRF token is invalid')

    if payload.get('purpose') != CSRF_PURPOSE:
        raise CsrfTokenInvalid('CSRF token is invalid')

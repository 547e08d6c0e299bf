"""Error taxonomy shared by the services and routes."""


class TranslationAdminError(Exception):
    """Base class for errors reported to the client as structured JSON."""

    status_code = 500
    error_type = 'error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message, 'type': self.error_type}


class NotFound(TranslationAdminError):
    """Referenced trans unit, translation or locale does not exist."""

    status_code = 404
    error_type = 'not_found'


class InvalidArgument(TranslationAdminError):
    """Unrecognized sort/filter column or malformed input."""

    status_code = 400
    error_type = 'invalid_argument'


class PersistenceFailure(TranslationAdminError):
    """The store failed to read or write."""

    status_code = 500
    error_type = 'persistence_failure'


class CsrfTokenInvalid(TranslationAdminError):
    """Missing, expired or forged CSRF token on an asynchronous request."""

    status_code = 403
    error_type = 'csrf_invalid'

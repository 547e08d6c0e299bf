"""Map service errors to JSON responses."""

import logging

from flask import jsonify

from translation_admin.exceptions import PersistenceFailure, TranslationAdminError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Register handlers that turn TranslationAdminError into structured responses."""

    @app.errorhandler(PersistenceFailure)
    def handle_persistence_failure(error):
        # Details are in the log, not in the response
        logger.error(f"Request failed with persistence error: {error.message}")
        return jsonify({'error': 'Internal server error', 'type': error.error_type}), error.status_code

    @app.errorhandler(TranslationAdminError)
    def handle_admin_error(error):
        logger.warning(f"Request rejected ({error.error_type}): {error.message}")
        return jsonify(error.to_dict()), error.status_code

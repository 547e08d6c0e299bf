"""Routes package for the translation admin."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .translation import translation_bp
    
    app.register_blueprint(translation_bp, url_prefix='/translations')

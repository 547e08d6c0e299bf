from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
import logging
import os
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()

logger = logging.getLogger(__name__)


def _env_flag(name, default='false'):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


def create_app(config_name='development', overrides=None):
    app = Flask(__name__)

    # Config
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv(
        'DATABASE_URL',
        'sqlite:///translations.db'
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev-secret')

    managed_locales = os.getenv('MANAGED_LOCALES', 'en')
    app.config['MANAGED_LOCALES'] = [
        locale.strip() for locale in managed_locales.split(',') if locale.strip()
    ]
    app.config['DEFAULT_LOCALE'] = os.getenv('DEFAULT_LOCALE')
    app.config['TRANSLATION_CACHE_DIR'] = os.getenv(
        'TRANSLATION_CACHE_DIR',
        os.path.join(app.instance_path, 'translations')
    )

    # Grid / presentation settings
    app.config['BASE_LAYOUT'] = os.getenv('BASE_LAYOUT', 'translation/layout.html')
    app.config['GRID_INPUT_TYPE'] = os.getenv('GRID_INPUT_TYPE', 'text')
    app.config['GRID_TOGGLE_SIMILAR'] = _env_flag('GRID_TOGGLE_SIMILAR')
    app.config['GRID_PAGE_SIZE'] = int(os.getenv('GRID_PAGE_SIZE', 20))
    app.config['AUTO_CACHE_CLEAN'] = _env_flag('AUTO_CACHE_CLEAN')
    app.config['DEV_TOOLS_ENABLED'] = _env_flag('DEV_TOOLS_ENABLED')
    app.config['CSRF_TOKEN_EXPIRES'] = int(os.getenv('CSRF_TOKEN_EXPIRES', 3600))

    if config_name == 'testing':
        app.config['TESTING'] = True
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'

    if overrides:
        app.config.update(overrides)

    # Initialize extensions
    db.init_app(app)
    CORS(app)

    from translation_admin.services import init_services
    init_services(app)

    with app.app_context():
        db.create_all()

    from translation_admin.utils.errors import register_error_handlers
    register_error_handlers(app)

    # Register routes
    from translation_admin.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({'status': 'ok'}), 200

    logger.info(f"Translation admin started ({config_name}), locales: {app.config['MANAGED_LOCALES']}")

    return app

"""
Pytest configuration and fixtures for testing the translation admin.
"""

import os
import sys
import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from translation_admin import create_app, db
from translation_admin.models import TransUnit, Translation
from translation_admin.services import EXTENSION_KEY

fake = Faker()

MANAGED_LOCALES = ['en', 'fr', 'de']


@pytest.fixture(scope='session')
def app(tmp_path_factory):
    """Create application for testing."""
    app = create_app('testing', overrides={
        'SECRET_KEY': 'test-secret-key-for-testing',
        'MANAGED_LOCALES': MANAGED_LOCALES,
        'TRANSLATION_CACHE_DIR': str(tmp_path_factory.mktemp('translation-cache')),
        'GRID_PAGE_SIZE': 5,
    })

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session and an empty cache directory for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        app.extensions[EXTENSION_KEY].translator.remove_all_cache_files()
        yield db.session
        db.session.rollback()


@pytest.fixture
def services(app, db_session):
    """The service container attached to the test app."""
    return app.extensions[EXTENSION_KEY]


def _create_trans_unit(domain='messages', key=None, **contents):
    """Helper to create a trans unit with one translation per keyword locale."""
    unit = TransUnit(domain=domain, key=key or fake.unique.slug())
    for locale, content in contents.items():
        unit.translations.append(Translation(locale=locale, content=content))
    db.session.add(unit)
    db.session.commit()
    return unit


@pytest.fixture
def create_trans_unit(db_session):
    """Factory fixture for trans units."""
    return _create_trans_unit


@pytest.fixture
def hello_unit(db_session):
    """messages/hello translated in English and French."""
    return _create_trans_unit(domain='messages', key='hello', en='Hello', fr='Bonjour')


@pytest.fixture
def many_units(db_session):
    """25 units spread over three domains, inserted out of order."""
    units = []
    for i in range(25):
        units.append(_create_trans_unit(
            domain=['validators', 'messages', 'admin'][i % 3],
            key=f'key_{(i * 7) % 25:02d}',
            en=fake.sentence(nb_words=3),
        ))
    return units

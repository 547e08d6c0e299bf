#!/usr/bin/env python
"""Database initialization script for the translation admin.

Creates the trans unit and translation tables, and optionally seeds a
few example units.

Usage:
    python init_db.py [--seed]
"""

import os
import sys
from translation_admin import create_app, db
from translation_admin.models import TransUnit, Translation

SEED_UNITS = [
    ('messages', 'hello', {'en': 'Hello', 'fr': 'Bonjour'}),
    ('messages', 'goodbye', {'en': 'Goodbye', 'fr': 'Au revoir'}),
    ('validators', 'not_blank', {'en': 'This value should not be blank.'}),
]


def seed_database():
    """Insert example units that do not exist yet."""
    created = 0
    for domain, key, contents in SEED_UNITS:
        if TransUnit.query.filter_by(domain=domain, key=key).first():
            continue
        unit = TransUnit(domain=domain, key=key)
        for locale, content in contents.items():
            unit.translations.append(Translation(locale=locale, content=content))
        db.session.add(unit)
        created += 1
    db.session.commit()
    return created


def init_database(seed=False):
    """Initialize the database by creating all tables."""

    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)

    print(f"\n{'='*60}")
    print(f"Database Initialization for {config_name.upper()} Environment")
    print(f"{'='*60}\n")

    with app.app_context():
        try:
            print(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}\n")

            db.create_all()

            print("Created tables:")
            for table_name in db.metadata.tables:
                print(f"  - {table_name}")

            if seed:
                print(f"\nSeeded {seed_database()} trans unit(s)")

            print("\nNext steps:")
            print("  1. Start the Flask server: python wsgi.py")
            print("  2. Open /translations/grid")
            print("\n")

            return True

        except Exception as e:
            db.session.rollback()
            print(f"Error creating database: {type(e).__name__}: {e}\n")
            return False

if __name__ == '__main__':
    success = init_database(seed='--seed' in sys.argv)
    sys.exit(0 if success else 1)

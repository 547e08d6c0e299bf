"""Alembic environment for the translation tables.

The database URL comes from the Flask app so migrations and the running
admin always target the same store.
"""

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from translation_admin import create_app, db
from translation_admin.models import TransUnit, Translation  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

app = create_app()


def database_url():
    url = app.config['SQLALCHEMY_DATABASE_URI']
    # Some hosts still hand out postgres:// URLs
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


if context.is_offline_mode():
    context.configure(url=database_url(), target_metadata=db.metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()
else:
    engine = create_engine(database_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=db.metadata)
        with context.begin_transaction():
            context.run_migrations()

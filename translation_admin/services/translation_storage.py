"""SQLAlchemy-backed store for trans units and their translations.

Every public method runs against the Flask-SQLAlchemy session. Database
errors roll the session back and surface as PersistenceFailure; nothing
is retried.
"""

import logging
from functools import wraps

from sqlalchemy import and_, func
from sqlalchemy.exc import SQLAlchemyError

from translation_admin.exceptions import PersistenceFailure
from translation_admin.models import TransUnit, Translation

logger = logging.getLogger(__name__)

# Columns a grid page may be ordered by
SORTABLE_COLUMNS = {
    'id': TransUnit.id,
    'domain': TransUnit.domain,
    'key': TransUnit.key,
    'created_at': TransUnit.created_at,
    'updated_at': TransUnit.updated_at,
}

DEFAULT_ORDER = ('domain', 'key')


def persistence_guard(f):
    """Roll back and convert SQLAlchemy errors raised by a store operation."""
    @wraps(f)
    def decorated(self, *args, **kwargs):
        try:
            return f(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(f"Translation store operation '{f.__name__}' failed")
            raise PersistenceFailure(f"Translation store error during {f.__name__}") from e
    return decorated


class TranslationStorage:
    """Persistence abstraction over TransUnit and Translation records."""

    def __init__(self, session):
        self.session = session

    # ============ listing ============

    @persistence_guard
    def list(self, locales, page=1, page_size=20, sort=None):
        """Return one page of trans units.

        `sort` is an optional (column, direction) pair with an already
        validated column name. `locales` is accepted for the contract; the
        translations of each unit are restricted by the caller.
        """
        query = self.session.query(TransUnit).order_by(*self._order_by(sort))
        return query.offset((page - 1) * page_size).limit(page_size).all()

    @persistence_guard
    def count(self):
        return self.session.query(func.count(TransUnit.id)).scalar() or 0

    @persistence_guard
    def find_by_filter(self, column, value, column_type, locales):
        """Return trans units matching a single column filter, in default order."""
        condition = self._filter_condition(column, value, column_type, locales)
        return self.session.query(TransUnit).filter(condition).order_by(*self._order_by(None)).all()

    def _order_by(self, sort):
        if not sort or not sort[0]:
            return [SORTABLE_COLUMNS[name].asc() for name in DEFAULT_ORDER] + [TransUnit.id.asc()]

        column, direction = sort
        attribute = SORTABLE_COLUMNS[column]
        ordered = attribute.desc() if direction == 'desc' else attribute.asc()
        if column == 'id':
            return [ordered]
        # id keeps pages disjoint when the sort column has duplicates
        return [ordered, TransUnit.id.asc()]

    def _filter_condition(self, column, value, column_type, locales):
        if column == 'id':
            return TransUnit.id == int(value)

        if column in ('domain', 'key'):
            attribute = TransUnit.domain if column == 'domain' else TransUnit.key
            if column_type == 'exact':
                return attribute == value
            return attribute.icontains(value, autoescape=True)

        if column == 'locale':
            return TransUnit.translations.any(Translation.locale == value)

        # Content search: `column` is either a locale code or "content"
        searched_locales = locales if column == 'content' else [column]
        if column_type == 'exact':
            content_match = Translation.content == value
        else:
            content_match = Translation.content.icontains(value, autoescape=True)
        return TransUnit.translations.any(
            and_(Translation.locale.in_(searched_locales), content_match)
        )

    # ============ single records ============

    @persistence_guard
    def find_trans_unit(self, trans_unit_id):
        return self.session.get(TransUnit, trans_unit_id)

    @persistence_guard
    def find_trans_unit_by_key(self, key, domain):
        return self.session.query(TransUnit).filter_by(key=key, domain=domain).first()

    @persistence_guard
    def find_translation(self, trans_unit_id, locale):
        return self.session.query(Translation).filter_by(
            trans_unit_id=trans_unit_id,
            locale=locale
        ).first()

    # ============ writes ============

    @persistence_guard
    def save(self, entity):
        self.session.add(entity)

    @persistence_guard
    def delete(self, entity):
        self.session.delete(entity)

    @persistence_guard
    def flush(self):
        """Commit pending writes."""
        self.session.commit()

    # ============ overview ============

    @persistence_guard
    def get_trans_unit_domains(self):
        rows = self.session.query(TransUnit.domain).distinct().order_by(TransUnit.domain).all()
        return [row[0] for row in rows]

    @persistence_guard
    def get_latest_updated_at(self):
        """Return the most recent translation update time, or None."""
        return self.session.query(func.max(Translation.updated_at)).scalar()

    @persistence_guard
    def count_trans_units_by_domain(self):
        rows = self.session.query(
            TransUnit.domain,
            func.count(TransUnit.id)
        ).group_by(TransUnit.domain).all()
        return {domain: count for domain, count in rows}

    @persistence_guard
    def count_translations_by_locale(self, locale):
        """Count translations with non-empty content for a locale, per domain."""
        rows = self.session.query(
            TransUnit.domain,
            func.count(Translation.id)
        ).join(
            Translation, Translation.trans_unit_id == TransUnit.id
        ).filter(
            Translation.locale == locale,
            Translation.content.isnot(None),
            Translation.content != ''
        ).group_by(TransUnit.domain).all()
        return {domain: count for domain, count in rows}

    @persistence_guard
    def get_catalogue(self, locale):
        """Return {domain: {key: content}} for every non-empty translation of a locale."""
        rows = self.session.query(
            TransUnit.domain,
            TransUnit.key,
            Translation.content
        ).join(
            Translation, Translation.trans_unit_id == TransUnit.id
        ).filter(
            Translation.locale == locale,
            Translation.content.isnot(None),
            Translation.content != ''
        ).all()

        catalogue = {}
        for domain, key, content in rows:
            catalogue.setdefault(domain, {})[key] = content
        return catalogue

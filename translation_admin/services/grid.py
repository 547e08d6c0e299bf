"""Translation grid: paging, sorting, filtering and inline edits.

The grid holds no state between requests. Every operation reads from and
writes to the translation store and returns plain rows for the templates.
Concurrent edits of the same cell are last-write-wins.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from translation_admin.exceptions import InvalidArgument, NotFound
from translation_admin.models import Translation
from translation_admin.services.translation_storage import SORTABLE_COLUMNS

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
SORT_DIRECTIONS = ('asc', 'desc')

FILTER_COLUMN_TYPES = ('exact', 'text', 'content')
UNIT_FILTER_COLUMNS = ('id', 'domain', 'key')

# Values of the `column` field accepted by the legacy save endpoint
UPDATE_COLUMN = 'translation'
DELETE_COLUMN = 'delete'

MAX_TRANS_UNIT_ID = 2 ** 63 - 1


@dataclass
class PageRequest:
    page: int = 1
    page_size: Optional[int] = None
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None

    @property
    def sort(self) -> Optional[Tuple[str, Optional[str]]]:
        if not self.sort_column:
            return None
        return (self.sort_column, self.sort_direction)


@dataclass
class GridRow:
    """One trans unit with its visible translations keyed by locale."""

    id: int
    domain: str
    key: str
    translations: Dict[str, Optional[str]] = field(default_factory=dict)

    @classmethod
    def from_trans_unit(cls, trans_unit, locales):
        return cls(
            id=trans_unit.id,
            domain=trans_unit.domain,
            key=trans_unit.key,
            translations={
                t.locale: t.content for t in trans_unit.translations if t.locale in locales
            },
        )


def parse_trans_unit_id(value) -> int:
    try:
        trans_unit_id = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f'Invalid trans unit id: {value!r}')
    # Must fit a signed 64-bit integer column
    if not 1 <= trans_unit_id <= MAX_TRANS_UNIT_ID:
        raise InvalidArgument(f'Trans unit id out of range: {value!r}')
    return trans_unit_id


class GridService:
    """Orchestrates grid requests against the translation store."""

    def __init__(self, storage, translator, locale_manager, auto_cache_clean=False, page_size=DEFAULT_PAGE_SIZE):
        self.storage = storage
        self.translator = translator
        self.locale_manager = locale_manager
        self.auto_cache_clean = auto_cache_clean
        self.page_size = page_size

    # ============ listing ============

    def list_page(self, managed_locales, page=1, page_size=None, sort=None) -> List[GridRow]:
        """
        Return one page of rows ordered by `sort`.

        `sort` is an optional (column, direction) pair. Without a column the
        rows are ordered by domain, then key. `page_size` defaults to the
        configured grid page size. Unknown columns or directions raise
        InvalidArgument.
        """
        if page is None:
            page = 1
        if page_size is None:
            page_size = self.page_size
        if page < 1:
            raise InvalidArgument(f'Page must be 1 or greater, got {page}')
        if page_size < 1:
            raise InvalidArgument(f'Page size must be 1 or greater, got {page_size}')
        if page * page_size > MAX_TRANS_UNIT_ID:
            raise InvalidArgument(f'Page {page} is out of range')

        trans_units = self.storage.list(
            managed_locales,
            page=page,
            page_size=page_size,
            sort=self._validate_sort(sort)
        )
        return [GridRow.from_trans_unit(unit, managed_locales) for unit in trans_units]

    def count(self) -> int:
        return self.storage.count()

    def _validate_sort(self, sort):
        if not sort or not sort[0]:
            return None

        column, direction = sort
        if column not in SORTABLE_COLUMNS:
            raise InvalidArgument(
                f'Invalid sort column "{column}". Must be one of: {", ".join(SORTABLE_COLUMNS)}'
            )

        direction = (direction or 'asc').lower()
        if direction not in SORT_DIRECTIONS:
            raise InvalidArgument(f'Invalid sort direction "{direction}". Must be asc or desc')
        return (column, direction)

    # ============ filtering ============

    def filter(self, managed_locales, column, value, column_type) -> List[GridRow]:
        """
        Return rows whose `column` matches `value`.

        An empty value lists the first page with the default order. The
        "locale" column shows only the translation of the filtered locale.
        No match returns an empty list.
        """
        if value is None or value == '':
            return self.list_page(managed_locales)

        self._validate_filter(managed_locales, column, value, column_type)

        visible_locales = managed_locales
        if column == 'locale':
            if value not in managed_locales:
                return []
            visible_locales = [value]

        trans_units = self.storage.find_by_filter(column, value, column_type, managed_locales)
        return [GridRow.from_trans_unit(unit, visible_locales) for unit in trans_units]

    def _validate_filter(self, managed_locales, column, value, column_type):
        if column_type not in FILTER_COLUMN_TYPES:
            raise InvalidArgument(
                f'Invalid column type "{column_type}". Must be one of: {", ".join(FILTER_COLUMN_TYPES)}'
            )

        if column in ('id', 'locale'):
            if column_type != 'exact':
                raise InvalidArgument(f'Column "{column}" only supports exact matching')
            if column == 'id':
                parse_trans_unit_id(value)
        elif column in UNIT_FILTER_COLUMNS:
            if column_type == 'content':
                raise InvalidArgument(f'Column "{column}" does not hold translation content')
        elif column != 'content' and column not in managed_locales:
            logger.warning(f"Rejected grid filter on unknown column '{column}'")
            raise InvalidArgument(f'Invalid filter column "{column}"')

    # ============ edits ============

    def update_translation_content(self, trans_unit_id, locale, content):
        """Set the content of a unit's translation, creating it if the locale has none yet."""
        trans_unit_id = parse_trans_unit_id(trans_unit_id)
        trans_unit = self.storage.find_trans_unit(trans_unit_id)
        if trans_unit is None:
            raise NotFound(f'Trans unit {trans_unit_id} not found')
        if not self.locale_manager.is_managed(locale):
            raise NotFound(f'Locale "{locale}" is not managed')

        translation = self.storage.find_translation(trans_unit_id, locale)
        if translation is None:
            translation = Translation(locale=locale)
            trans_unit.translations.append(translation)

        translation.content = content
        translation.modified_manually = True
        trans_unit.updated_at = datetime.utcnow()

        self.storage.save(translation)
        self.storage.flush()
        logger.info(f"Updated translation {trans_unit.domain}/{trans_unit.key} [{locale}]")

        if self.auto_cache_clean:
            self.invalidate_cache([locale])
        return translation

    def delete_trans_unit(self, trans_unit_id):
        """Delete a unit together with all of its translations."""
        trans_unit_id = parse_trans_unit_id(trans_unit_id)
        trans_unit = self.storage.find_trans_unit(trans_unit_id)
        if trans_unit is None:
            raise NotFound(f'Trans unit {trans_unit_id} not found')

        label = f'{trans_unit.domain}/{trans_unit.key}'
        self.storage.delete(trans_unit)
        self.storage.flush()
        logger.info(f"Deleted trans unit {trans_unit_id} ({label})")

        if self.auto_cache_clean:
            self.invalidate_cache(self.locale_manager.get_locales())

    def update_cell(self, trans_unit_id, locale, column, new_value):
        """Dispatch the legacy grid save request to an update or a delete."""
        if column == UPDATE_COLUMN:
            return self.update_translation_content(trans_unit_id, locale, new_value)
        if column == DELETE_COLUMN:
            return self.delete_trans_unit(trans_unit_id)
        raise InvalidArgument(
            f'Invalid column "{column}". Must be "{UPDATE_COLUMN}" or "{DELETE_COLUMN}"'
        )

    # ============ cache ============

    def invalidate_cache(self, managed_locales):
        """Drop generated catalogue files for each locale. Safe to repeat."""
        self.translator.remove_locales_cache_files(managed_locales)
        logger.info(f"Invalidated translation cache for locales: {', '.join(managed_locales)}")

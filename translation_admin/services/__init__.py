"""Service wiring for the translation admin.

The services are built once per application in ``init_services`` and
looked up by the routes through ``get_services``.
"""

from dataclasses import dataclass
from typing import Optional

from flask import current_app

from translation_admin import db
from translation_admin.services.grid import GridService
from translation_admin.services.locale_manager import LocaleManager
from translation_admin.services.stats_aggregator import StatsAggregator
from translation_admin.services.token_finder import TokenFinder
from translation_admin.services.trans_unit_form import TransUnitFormHandler
from translation_admin.services.translation_storage import TranslationStorage
from translation_admin.services.translator import Translator
from translation_admin.utils.config import GridConfig

EXTENSION_KEY = 'translation_admin'


@dataclass
class TranslationServices:
    locale_manager: LocaleManager
    storage: TranslationStorage
    translator: Translator
    stats_aggregator: StatsAggregator
    grid: GridService
    form_handler: TransUnitFormHandler
    grid_config: GridConfig
    token_finder: Optional[TokenFinder] = None

    def get_managed_locales(self):
        return self.locale_manager.get_locales()


def init_services(app):
    """Build the services from the app config and attach them to the app."""
    locale_manager = LocaleManager(app.config['MANAGED_LOCALES'])
    storage = TranslationStorage(db.session)

    # The token finder only exists when developer tools are enabled
    token_finder = None
    if app.config.get('DEV_TOOLS_ENABLED'):
        token_finder = TokenFinder()
        token_finder.init_app(app)

    locales = locale_manager.get_locales()
    translator = Translator(
        storage,
        app.config['TRANSLATION_CACHE_DIR'],
        default_locale=app.config.get('DEFAULT_LOCALE') or (locales[0] if locales else 'en'),
        on_missing=token_finder.record_missing if token_finder else None
    )

    services = TranslationServices(
        locale_manager=locale_manager,
        storage=storage,
        translator=translator,
        stats_aggregator=StatsAggregator(storage, locale_manager),
        grid=GridService(
            storage,
            translator,
            locale_manager,
            auto_cache_clean=app.config.get('AUTO_CACHE_CLEAN', False),
            page_size=int(app.config.get('GRID_PAGE_SIZE', 20))
        ),
        form_handler=TransUnitFormHandler(storage, locale_manager, translator),
        grid_config=GridConfig.from_app_config(app.config),
        token_finder=token_finder,
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> TranslationServices:
    return current_app.extensions[EXTENSION_KEY]

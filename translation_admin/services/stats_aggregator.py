"""Completion statistics for the overview screen."""


class StatsAggregator:
    """Compute translated/total counts per domain and managed locale."""

    def __init__(self, storage, locale_manager):
        self.storage = storage
        self.locale_manager = locale_manager

    def get_stats(self):
        """
        Return completion stats keyed by domain, then locale.

        Each entry holds `keys` (units in the domain), `translated` (units
        with non-empty content for the locale) and `completed`, the
        translated share as a percentage rounded to two decimals.
        """
        units_by_domain = self.storage.count_trans_units_by_domain()
        locales = self.locale_manager.get_locales()
        translated_by_locale = {
            locale: self.storage.count_translations_by_locale(locale)
            for locale in locales
        }

        stats = {}
        for domain in self.storage.get_trans_unit_domains():
            keys = units_by_domain.get(domain, 0)
            stats[domain] = {}
            for locale in locales:
                translated = translated_by_locale[locale].get(domain, 0)
                stats[domain][locale] = {
                    'keys': keys,
                    'translated': translated,
                    'completed': round(translated / keys * 100, 2) if keys > 0 else 0,
                }
        return stats

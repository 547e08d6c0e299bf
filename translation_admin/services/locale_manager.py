"""Managed locale registry."""


class LocaleManager:
    """Ordered set of locales the admin maintains translations for."""

    def __init__(self, locales):
        # Keep the configured order, drop duplicates
        self._locales = list(dict.fromkeys(locales))

    def get_locales(self):
        return list(self._locales)

    def is_managed(self, locale):
        return locale in self._locales

"""Catalogue translator backed by the translation store.

Catalogues are generated per locale from the database and written to the
cache directory as ``catalogue.<locale>.json``. Editing translations makes
those files stale, so the admin removes them (see
``remove_locales_cache_files``) and the next lookup regenerates them.
"""

import glob
import json
import logging
import os
import tempfile

logger = logging.getLogger(__name__)

ADMIN_DOMAIN = 'TranslationAdmin'

# Messages used by the admin screens when the store has no override
DEFAULT_MESSAGES = {
    'translations.cache_removed': 'Translations cache has been removed.',
    'translations.successfully_added': 'The translation has been successfully added.',
    'translations.successfully_updated': 'The translation has been successfully updated.',
    'translations.successfully_deleted': 'The translation has been successfully deleted.',
    'translations.no_results': 'No translation found.',
    'translations.key_required': 'A key is required.',
    'translations.domain_required': 'A domain is required.',
    'translations.key_exists': 'The key "%key%" already exists in domain "%domain%".',
}


class Translator:
    """Serve lookups from cached catalogues and manage their cache files."""

    def __init__(self, storage, cache_dir, default_locale='en', on_missing=None):
        self.storage = storage
        self.cache_dir = cache_dir
        self.default_locale = default_locale
        # Called as on_missing(locale, domain, key) when a lookup falls back
        self.on_missing = on_missing

    def cache_file(self, locale):
        return os.path.join(self.cache_dir, f'catalogue.{locale}.json')

    def get_catalogue(self, locale):
        """Return {domain: {key: content}} for a locale, generating the cache file if needed."""
        path = self.cache_file(locale)
        if os.path.isfile(path):
            try:
                with open(path, 'r', encoding='utf-8') as handle:
                    return json.load(handle)
            except json.JSONDecodeError:
                logger.warning(f"Discarding unreadable catalogue cache {path}")

        catalogue = self.storage.get_catalogue(locale)
        self._write_cache_file(path, catalogue)
        logger.debug(f"Generated catalogue cache for locale '{locale}' at {path}")
        return catalogue

    def _write_cache_file(self, path, catalogue):
        # Readers only ever see a complete file
        os.makedirs(self.cache_dir, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            'w',
            encoding='utf-8',
            dir=self.cache_dir,
            prefix='.catalogue-',
            suffix='.tmp',
            delete=False
        ) as handle:
            json.dump(catalogue, handle, ensure_ascii=False, sort_keys=True)
        try:
            os.replace(handle.name, path)
        except OSError:
            os.remove(handle.name)
            raise

    def trans(self, key, domain='messages', locale=None, parameters=None):
        """Translate `key`, replacing ``%name%`` placeholders from `parameters`."""
        locale = locale or self.default_locale
        message = self.get_catalogue(locale).get(domain, {}).get(key)

        if message is None:
            if self.on_missing is not None:
                self.on_missing(locale, domain, key)
            message = DEFAULT_MESSAGES.get(key, key) if domain == ADMIN_DOMAIN else key

        for name, value in (parameters or {}).items():
            message = message.replace(f'%{name}%', str(value))
        return message

    def remove_cache_file(self, locale):
        """Remove the cache files of one locale. Returns True if anything was removed."""
        pattern = os.path.join(self.cache_dir, f'catalogue.{glob.escape(locale)}.*')
        return self._remove_files(glob.glob(pattern))

    def remove_locales_cache_files(self, locales):
        """Remove the cache files of every given locale; already clean locales are skipped."""
        for locale in locales:
            self.remove_cache_file(locale)

    def remove_all_cache_files(self):
        return self._remove_files(glob.glob(os.path.join(self.cache_dir, 'catalogue.*')))

    def _remove_files(self, paths):
        removed = False
        for path in paths:
            try:
                os.remove(path)
                removed = True
                logger.info(f"Removed translation cache file {path}")
            except FileNotFoundError:
                # Already gone
                continue
        return removed

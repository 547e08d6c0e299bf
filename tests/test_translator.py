"""
Tests for the catalogue translator and its cache files.
"""

import json
import os

from translation_admin.services.translator import ADMIN_DOMAIN


class TestCatalogueCache:
    """Tests for catalogue cache files"""

    def test_catalogue_file_is_generated(self, services, hello_unit):
        translator = services.translator

        catalogue = translator.get_catalogue('fr')

        assert catalogue == {'messages': {'hello': 'Bonjour'}}
        with open(translator.cache_file('fr'), encoding='utf-8') as handle:
            assert json.load(handle) == catalogue

    def test_stale_cache_until_removed(self, services, hello_unit):
        translator = services.translator
        assert translator.trans('hello', locale='fr') == 'Bonjour'

        translation = services.storage.find_translation(hello_unit.id, 'fr')
        translation.content = 'Salut'
        services.storage.flush()

        assert translator.trans('hello', locale='fr') == 'Bonjour'
        assert translator.remove_cache_file('fr') is True
        assert translator.trans('hello', locale='fr') == 'Salut'

    def test_corrupt_cache_file_is_regenerated(self, services, hello_unit):
        translator = services.translator
        with open(translator.cache_file('en'), 'w', encoding='utf-8') as handle:
            handle.write('{"messages": {')

        assert translator.trans('hello', locale='en') == 'Hello'
        with open(translator.cache_file('en'), encoding='utf-8') as handle:
            assert json.load(handle) == {'messages': {'hello': 'Hello'}}

    def test_no_temporary_files_left_behind(self, services, hello_unit):
        translator = services.translator

        translator.get_catalogue('en')
        translator.get_catalogue('fr')

        assert sorted(os.listdir(translator.cache_dir)) == ['catalogue.en.json', 'catalogue.fr.json']

    def test_remove_clean_locale_is_noop(self, services):
        assert services.translator.remove_cache_file('en') is False
        services.translator.remove_locales_cache_files(['en', 'fr'])

    def test_remove_all(self, services, hello_unit):
        translator = services.translator
        translator.get_catalogue('en')
        translator.get_catalogue('fr')

        assert translator.remove_all_cache_files() is True
        assert not os.path.exists(translator.cache_file('en'))
        assert not os.path.exists(translator.cache_file('fr'))


class TestTrans:
    """Tests for Translator.trans"""

    def test_default_locale(self, services, hello_unit):
        assert services.translator.trans('hello') == 'Hello'

    def test_missing_key_returns_key(self, services):
        assert services.translator.trans('unknown.key', locale='fr') == 'unknown.key'

    def test_admin_messages_fall_back_to_defaults(self, services):
        message = services.translator.trans('translations.cache_removed', ADMIN_DOMAIN)

        assert message == 'Translations cache has been removed.'

    def test_admin_messages_can_be_overridden(self, services, create_trans_unit):
        create_trans_unit(domain=ADMIN_DOMAIN, key='translations.cache_removed', fr='Cache vidé.')

        assert services.translator.trans('translations.cache_removed', ADMIN_DOMAIN, 'fr') == 'Cache vidé.'

    def test_parameters(self, services):
        message = services.translator.trans(
            'translations.key_exists',
            ADMIN_DOMAIN,
            parameters={'key': 'hello', 'domain': 'messages'}
        )

        assert message == 'The key "hello" already exists in domain "messages".'

    def test_missing_callback(self, services):
        missing = []
        services.translator.on_missing = lambda *args: missing.append(args)
        try:
            services.translator.trans('nope', 'messages', 'de')
        finally:
            services.translator.on_missing = None

        assert missing == [('de', 'messages', 'nope')]

"""
Tests for the translation store.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from translation_admin.exceptions import PersistenceFailure
from translation_admin.models import TransUnit
from translation_admin.services.translation_storage import TranslationStorage


class TestOverviewQueries:
    """Tests for the helpers used by the overview screen"""

    def test_domains_are_distinct_and_sorted(self, services, create_trans_unit):
        create_trans_unit(domain='validators', key='a')
        create_trans_unit(domain='messages', key='b')
        create_trans_unit(domain='messages', key='c')

        assert services.storage.get_trans_unit_domains() == ['messages', 'validators']

    def test_count_by_domain(self, services, create_trans_unit):
        create_trans_unit(domain='validators', key='a', en='A')
        create_trans_unit(domain='messages', key='b', en='B')
        create_trans_unit(domain='messages', key='c')

        assert services.storage.count_trans_units_by_domain() == {'messages': 2, 'validators': 1}
        assert services.storage.count() == 3

    def test_count_translations_ignores_empty_content(self, services, create_trans_unit):
        create_trans_unit(domain='messages', key='a', en='A', fr='')
        create_trans_unit(domain='messages', key='b', en='B', fr='Bé')

        assert services.storage.count_translations_by_locale('en') == {'messages': 2}
        assert services.storage.count_translations_by_locale('fr') == {'messages': 1}
        assert services.storage.count_translations_by_locale('de') == {}

    def test_latest_updated_at(self, services, db_session, hello_unit):
        assert services.storage.get_latest_updated_at() is not None

    def test_latest_updated_at_empty(self, services):
        assert services.storage.get_latest_updated_at() is None

    def test_catalogue(self, services, hello_unit, create_trans_unit):
        create_trans_unit(domain='validators', key='not_blank', en='Not blank', fr='')

        assert services.storage.get_catalogue('fr') == {'messages': {'hello': 'Bonjour'}}
        assert services.storage.get_catalogue('en') == {
            'messages': {'hello': 'Hello'},
            'validators': {'not_blank': 'Not blank'},
        }


class TestRecords:
    """Tests for single record lookups and writes"""

    def test_find_by_key(self, services, hello_unit):
        assert services.storage.find_trans_unit_by_key('hello', 'messages').id == hello_unit.id
        assert services.storage.find_trans_unit_by_key('hello', 'validators') is None

    def test_save_and_flush(self, services):
        services.storage.save(TransUnit(domain='messages', key='saved'))
        services.storage.flush()

        assert services.storage.count() == 1

    def test_delete(self, services, hello_unit):
        services.storage.delete(hello_unit)
        services.storage.flush()

        assert services.storage.count() == 0


class TestPersistenceFailure:
    """Database errors surface as PersistenceFailure after a rollback"""

    def test_commit_error(self):
        session = MagicMock()
        session.commit.side_effect = OperationalError('COMMIT', {}, Exception('disk I/O error'))
        storage = TranslationStorage(session)

        with pytest.raises(PersistenceFailure):
            storage.flush()

        session.rollback.assert_called_once()

    def test_query_error(self):
        session = MagicMock()
        session.query.side_effect = OperationalError('SELECT', {}, Exception('no such table'))
        storage = TranslationStorage(session)

        with pytest.raises(PersistenceFailure):
            storage.count()


class TestModels:

    def test_duplicate_key_in_domain_is_rejected(self, services, hello_unit):
        services.storage.save(TransUnit(domain='messages', key='hello'))

        with pytest.raises(PersistenceFailure):
            services.storage.flush()

        assert services.storage.count() == 1

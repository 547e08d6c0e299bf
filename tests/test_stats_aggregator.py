"""
Tests for the overview statistics.
"""

from translation_admin.services.locale_manager import LocaleManager
from translation_admin.services.stats_aggregator import StatsAggregator


class TestStatsAggregator:

    def test_completion_per_domain_and_locale(self, services, create_trans_unit):
        create_trans_unit(domain='messages', key='a', en='A', fr='A fr')
        create_trans_unit(domain='messages', key='b', en='B')
        create_trans_unit(domain='messages', key='c', en='C', fr='')
        create_trans_unit(domain='validators', key='d', de='D')

        stats = services.stats_aggregator.get_stats()

        assert stats['messages']['en'] == {'keys': 3, 'translated': 3, 'completed': 100.0}
        assert stats['messages']['fr'] == {'keys': 3, 'translated': 1, 'completed': 33.33}
        assert stats['messages']['de'] == {'keys': 3, 'translated': 0, 'completed': 0.0}
        assert stats['validators']['de']['completed'] == 100.0

    def test_empty_store(self, services):
        assert services.stats_aggregator.get_stats() == {}

    def test_uses_managed_locales_only(self, services, hello_unit):
        aggregator = StatsAggregator(services.storage, LocaleManager(['fr']))

        assert aggregator.get_stats() == {
            'messages': {'fr': {'keys': 1, 'translated': 1, 'completed': 100.0}}
        }


class TestLocaleManager:

    def test_order_is_kept_and_duplicates_dropped(self):
        manager = LocaleManager(['fr', 'en', 'fr'])

        assert manager.get_locales() == ['fr', 'en']
        assert manager.is_managed('en')
        assert not manager.is_managed('de')

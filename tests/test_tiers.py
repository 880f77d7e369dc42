# tests/test_tiers.py

import pytest

from pvpstats.tiers import (
    TIER_ORDER,
    UNKNOWN_GRADE,
    UNKNOWN_TIER_PRIORITY,
    parse_grade,
    parse_tier,
    split_tier,
    tier_priority,
    tier_sort_key,
)


class TestTierParsing:
    """Tier code priority and grade parsing."""

    @pytest.mark.parametrize('text,expected', [
        ('DIA III', ('DIA', 3)),
        ('GOLD 2', ('GOLD', 2)),
        ('BRON', ('BRON', UNKNOWN_GRADE)),
        ('STAR V', ('STAR', 5)),
        ('SILV IV', ('SILV', 4)),
        ('NETH abc', ('NETH', UNKNOWN_GRADE)),
        ('', ('', UNKNOWN_GRADE)),
        (None, ('', UNKNOWN_GRADE)),
    ])
    def test_parse_tier(self, text, expected):
        assert parse_tier(text) == expected

    def test_split_tier_tolerates_extra_whitespace(self):
        assert split_tier('  AME   I ') == ('AME', 'I')

    def test_roman_numerals_beyond_five_unknown(self):
        assert parse_grade('VI') == UNKNOWN_GRADE

    def test_lowercase_roman_not_recognized(self):
        assert parse_grade('ii') == UNKNOWN_GRADE

    def test_known_tier_priorities(self):
        ordered = sorted(TIER_ORDER, key=tier_priority)
        assert ordered == ['STAR', 'NETH', 'DIA', 'AME', 'GOLD', 'SILV', 'BRON']

    def test_unknown_tier_sorts_last(self):
        assert tier_priority('ROOKIE') == UNKNOWN_TIER_PRIORITY
        assert all(tier_priority(code) < UNKNOWN_TIER_PRIORITY for code in TIER_ORDER)

    def test_sort_key_orders_tier_before_grade(self):
        tiers = ['GOLD I', 'STAR II', 'BRON', 'STAR I', 'ROOKIE I', 'DIA 3']
        assert sorted(tiers, key=tier_sort_key) == [
            'STAR I', 'STAR II', 'DIA 3', 'GOLD I', 'BRON', 'ROOKIE I'
        ]

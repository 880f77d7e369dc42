# pvpstats/tiers.py

from typing import Any, Tuple

TIER_ORDER = {
    'STAR': 0,
    'NETH': 1,
    'DIA': 2,
    'AME': 3,
    'GOLD': 4,
    'SILV': 5,
    'BRON': 6,
}
UNKNOWN_TIER_PRIORITY = 99

ROMAN_GRADES = {
    'I': 1,
    'II': 2,
    'III': 3,
    'IV': 4,
    'V': 5,
}
UNKNOWN_GRADE = 999


def split_tier(tier_text: Any) -> Tuple[str, str]:
    """Split "<CODE> <grade>" into its two tokens; missing parts are ''."""
    parts = str(tier_text or '').split()
    code = parts[0] if parts else ''
    grade = parts[1] if len(parts) > 1 else ''
    return code, grade


def tier_priority(code: str) -> int:
    return TIER_ORDER.get(code, UNKNOWN_TIER_PRIORITY)


def parse_grade(grade: str) -> int:
    """Roman numeral I-V or a decimal integer; anything else is UNKNOWN_GRADE."""
    if grade in ROMAN_GRADES:
        return ROMAN_GRADES[grade]
    if grade.isdecimal():
        return int(grade)
    return UNKNOWN_GRADE


def parse_tier(tier_text: Any) -> Tuple[str, int]:
    """
    Parse a tier string into (tier_code, grade_number).

    Examples:
        >>> parse_tier('DIA III')
        ('DIA', 3)
        >>> parse_tier('GOLD 2')
        ('GOLD', 2)
        >>> parse_tier('BRON')
        ('BRON', 999)
    """
    code, grade = split_tier(tier_text)
    return code, parse_grade(grade)


def tier_sort_key(tier_text: Any) -> Tuple[int, int]:
    code, grade = parse_tier(tier_text)
    return tier_priority(code), grade

"""Field corrections for ICC index records."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

GENERAL_LEVEL = "Nivel general"
CHAPTERS = "Capítulos"
ITEMS = "Ítems"

_ENCRYPTED_ITEMS = "@8310$7|59"
_DECRYPTED_ITEMS = "abeiostlmn"
_ITEMS_TABLE = str.maketrans(_ENCRYPTED_ITEMS, _DECRYPTED_ITEMS)

_DATE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


@dataclass(frozen=True)
class Record:
    """One row of an index file."""

    period: str
    level: str
    index: str
    classifier: str = ""


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _capitalize_first(text: str) -> str:
    if text and _is_lower(text[0]):
        return text[0].upper() + text[1:]
    return text


def fix_date_separators(period: str) -> str:
    """Turn dd/mm/yyyy into dd-mm-yyyy."""
    return period.replace("/", "-")


def pad_date(period: str) -> str:
    """Turn d-m-y into yyyy-mm-dd with leading zeroes."""
    match = _DATE.match(period)
    if match is None:
        raise ValueError(f"malformed period: {period!r}")
    day, month, year = (int(group) for group in match.groups())
    return f"{year:04d}-{month:02d}-{day:02d}"


def fix_decimal(index: str) -> str:
    """Use a dot as the decimal separator."""
    return index.replace(",", ".")


def decrypt_general_level(level: str) -> str:
    """Shift lowercase letters by 4 at even positions and 2 at odd ones."""
    decrypted = []
    for position, char in enumerate(level):
        if _is_lower(char):
            code = ord(char) + (4 if position % 2 == 0 else 2)
            if code > ord("z"):
                code -= 26
            char = chr(code)
        decrypted.append(char)
    return "".join(decrypted)


def normalize_general_level(level: str) -> str:
    """Capitalize the first letter and turn the remaining underscores into spaces."""
    if not level:
        return level
    return _capitalize_first(level[0]) + level[1:].replace("_", " ")


def decrypt_items_level(level: str) -> str:
    """Replace the substitution symbols with the letters they stand for."""
    return level.translate(_ITEMS_TABLE)


def normalize_items_level(level: str) -> str:
    """Drop everything up to the first underscore, capitalize, and space the rest."""
    head, underscore, rest = level.partition("_")
    if not underscore:
        return level
    rest = _capitalize_first(rest)
    if not rest:
        return rest
    return rest[0] + rest[1:].replace("_", " ")


def format_general_level(record: Record) -> Record:
    """Apply every correction for the general-level file."""
    period = pad_date(fix_date_separators(record.period))
    index = fix_decimal(record.index)
    level = normalize_general_level(decrypt_general_level(record.level))
    classifier = GENERAL_LEVEL if level == GENERAL_LEVEL else CHAPTERS
    return replace(record, period=period, level=level, index=index, classifier=classifier)


def format_items(record: Record) -> Record:
    """Apply every correction for the construction-items file."""
    period = pad_date(fix_date_separators(record.period))
    index = fix_decimal(record.index)
    level = normalize_items_level(decrypt_items_level(record.level))
    return replace(record, period=period, level=level, index=index, classifier=ITEMS)


def remove_char(text: str, char: str) -> str:
    """Return text with every occurrence of char removed."""
    return text.replace(char, "")
"""Splitting of combined make/model/variant/year strings."""

import re
from typing import Any

from dealer_listings.models.pydantic_models import SplitResult
from dealer_listings.splitting.vocabulary import (
    KNOWN_MAKES,
    MAKE_ALIASES,
    MAKE_CASE_FIXES,
    PARENT_COMPANIES,
)

# Longest first so "Land Rover" is tried before any shorter overlapping name
_SORTED_MAKES = sorted(KNOWN_MAKES, key=len, reverse=True)
_START_PATTERNS = [re.compile(rf"^{re.escape(make)}\b", re.IGNORECASE) for make in _SORTED_MAKES]
_ANYWHERE_PATTERNS = [re.compile(rf"\b{re.escape(make)}\b", re.IGNORECASE) for make in _SORTED_MAKES]
_PARENT_COMPANIES_LOWER = {parent.lower() for parent in PARENT_COMPANIES}

# Model years 1990-2039, optionally with a month fraction ("2022.6")
_YEAR_RE = re.compile(r"\b(199[0-9]|20[0-3][0-9])\b")
_DECIMAL_YEAR_RE = re.compile(r"\b(199[0-9]|20[0-3][0-9])\.\d+")
_WHITESPACE_RE = re.compile(r"\s+")


def canonical_make(matched: str) -> str:
    """Canonicalize matched make text.

    The alias lookup uses the text exactly as matched; the result is then
    capitalized (first letter upper, rest lower) with fixes for "Vw" and "Bmw".

    Examples:
        >>> canonical_make("VW")
        'Volkswagen'
        >>> canonical_make("bmw")
        'BMW'
        >>> canonical_make("Mercedes-Benz")
        'Mercedes'
    """
    make = MAKE_ALIASES.get(matched, matched)
    make = make[:1].upper() + make[1:].lower()
    return MAKE_CASE_FIXES.get(make, make)


def _match_make_at_start(text: str) -> tuple[str, str] | None:
    """Return (make, text after it) for a known make starting the text."""
    for pattern in _START_PATTERNS:
        match = pattern.match(text)
        if match:
            return canonical_make(match.group(0)), text[match.end():].strip()
    return None


def _match_make_anywhere(text: str) -> tuple[str, str] | None:
    """Return (make, remainder) for a known make anywhere in the text.

    The remainder is the text after the make or, when nothing follows it,
    the text before it ("Accord Honda").
    """
    for pattern in _ANYWHERE_PATTERNS:
        match = pattern.search(text)
        if match:
            before = text[:match.start()].strip()
            after = text[match.end():].strip()
            return canonical_make(match.group(0)), after or before
    return None


def _match_parent_prefixed_make(text: str) -> tuple[str, str] | None:
    """Return (make, remainder) for "<parent company> <make> ..." text."""
    first_word = _WHITESPACE_RE.split(text, maxsplit=1)[0]
    if first_word.lower() not in _PARENT_COMPANIES_LOWER:
        return None
    return _match_make_at_start(text[len(first_word):].strip())


def _extract_year(remainder: str) -> tuple[str, str]:
    """Pull a model year out of the remainder, returning (year, remainder)."""
    # "\b" also falls before ".", so "2022.6" matches here and leaves ".6" behind;
    # the decimal pattern below is never reached.
    match = _YEAR_RE.search(remainder)
    if match:
        return match.group(1), remainder.replace(match.group(0), "", 1).strip()

    match = _DECIMAL_YEAR_RE.search(remainder)
    if match:
        return match.group(1), remainder.replace(match.group(0), "", 1).strip()

    return "", remainder


def split_make_model(value: Any) -> SplitResult:
    """Split a combined value like "VW Tiguan 330TSI Luxury" into its parts.

    Algorithm (first success wins for the make):
    1. "<parent company> <make> ..." e.g. "GAC Honda Accord": the parent
       company is dropped and the make follows it
    2. A known make at the start of the string
    3. A known make anywhere in the string; the remainder is what follows
       it, or what precedes it when it is the last word
    4. Otherwise the make stays empty and the whole string is the remainder
    5. A year 1990-2039 (or "2022.6" style) is taken out of the remainder
    6. First remaining word is the model, the rest is the variant

    Args:
        value: Raw cell value.

    Returns:
        SplitResult with empty strings for undetermined parts. Non-string
        or empty input gives an all-empty result.

    Examples:
        >>> split_make_model("Audi A6 2020 quattro")
        SplitResult(make='Audi', model='A6', variant='quattro', year='2020')
        >>> split_make_model("GAC Honda Accord")
        SplitResult(make='Honda', model='Accord', variant='', year='')
    """
    if not value or not isinstance(value, str):
        return SplitResult()

    trimmed = value.strip()
    make = ""
    remainder = trimmed

    found = (
        _match_parent_prefixed_make(trimmed)
        or _match_make_at_start(trimmed)
        or _match_make_anywhere(trimmed)
    )
    if found:
        make, remainder = found

    year, remainder = _extract_year(remainder)

    parts = remainder.split()
    return SplitResult(
        make=make,
        model=parts[0] if parts else "",
        variant=" ".join(parts[1:]),
        year=year,
    )

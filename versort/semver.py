"""
Loosely-structured version strings, parsed into a totally ordered value.

The parser is heuristic rather than a Semantic Versioning implementation:
it accepts the spellings found in the wild ('1.0.0-rc.1', '1.0.0_rc1',
'2.4p3', '1.2b') and folds them into one shape,

    major[.minor[.patch[.ident]]] [release kind] [count]

Ordering compares (major, minor, patch, ident, rkind, count) left to right;
an absent field sorts before any present one, so 2.0 < 2.0.0, and release
kinds rank dev < pre < next < alpha < beta < rc < stable < patch.
"""

from __future__ import annotations

import functools
import logging
import re
import string
from dataclasses import dataclass, field
from typing import Optional

from versort.common import VersortError
from versort.release import COUNT_IS_CHAR_RE, SUFFIXES, ReleaseKind, classify, recognized

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_LETTER_RE = re.compile(r"[a-z]")
# last letter and whatever non-letters trail it
_LAST_LETTER_RE = re.compile(r"[a-z]([^a-z]*)$")
_SEPARATORS_RE = re.compile(r"[-_]")
_INT_RE = re.compile(r"\+?[0-9]+")

MAX_NUMERIC_PARTS = 4
# numbers wider than 64 bits are treated as text
MAX_NUMBER = 2**64 - 1


class SemverParseError(VersortError):
    pass


class UnrecognizedTextError(SemverParseError):
    def __init__(self, text=None):
        super().__init__("Unrecognized text")
        self.text = text


class MissingMajorError(SemverParseError):
    def __init__(self, text=None):
        super().__init__("Missing major")
        self.text = text


def _to_int(segment: str) -> Optional[int]:
    if not _INT_RE.fullmatch(segment):
        return None
    number = int(segment)
    return number if number <= MAX_NUMBER else None


def _optional_key(value):
    return (0, 0) if value is None else (1, value)


@functools.total_ordering
@dataclass(frozen=True)
class Semver:
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    ident: Optional[int] = None
    rkind: ReleaseKind = ReleaseKind.STABLE
    count: Optional[int] = None
    # True when count holds the code point of a trailing build letter.
    # Not part of equality or ordering.
    count_is_char: bool = field(default=False, compare=False)

    def sort_key(self) -> tuple:
        return (self.major,
                _optional_key(self.minor),
                _optional_key(self.patch),
                _optional_key(self.ident),
                int(self.rkind),
                _optional_key(self.count))

    def __lt__(self, other):
        if not isinstance(other, Semver):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return format_semver(self)

    @staticmethod
    def parse(raw: str, lenient: bool = False, count_is_char: bool = False) -> "Semver":
        return parse_semver(raw, lenient=lenient, count_is_char=count_is_char)


def _normalize(text: str, lenient: bool, count_is_char: bool) -> str:
    """
    Rewrite lower-case text so that the release marker, if any, is its own
    dot-separated segment with its counter attached: '1.0.0-rc.1',
    '1.0.0_rc1' and '1.0.0rc1' all become '1.0.0.rc1'.
    """
    first_letter = _LETTER_RE.search(text)
    if first_letter is not None:
        if not recognized(text, lenient=lenient, count_is_char=count_is_char):
            raise UnrecognizedTextError(text)

        # 'rc.1' -> 'rc1', but only when that dot is the final one
        last_letter = _LAST_LETTER_RE.search(text).start()
        if text.rfind('.') == last_letter + 1:
            text = text[:last_letter + 1] + text[last_letter + 2:]

        idx = first_letter.start()
        text = text[:idx] + '.' + text[idx:]

    return _SEPARATORS_RE.sub('', text)


def parse_semver(raw: str, lenient: bool = False, count_is_char: bool = False) -> Semver:
    """
    Parse raw into a Semver.

    lenient accepts letters that don't look like a known release marker
    (they then classify as STABLE). count_is_char reads a single trailing
    letter, as in '1.2b', as a build counter holding that letter's code
    point instead of as a release marker.

    Raises UnrecognizedTextError when the letters fail the recognition
    gate, MissingMajorError when there is no numeric segment at all.
    """
    text = _normalize(raw.translate(_ASCII_LOWER), lenient, count_is_char)
    logger.debug("normalized %r to %r", raw, text)

    parts = text.split('.')
    numbers = [n for n in (_to_int(p) for p in parts) if n is not None][:MAX_NUMERIC_PARTS]
    if not numbers:
        raise MissingMajorError(raw)
    numbers += [None] * (MAX_NUMERIC_PARTS - len(numbers))
    major, minor, patch, ident = numbers

    rkind = ReleaseKind.STABLE
    count = None
    char_count = False
    last_bit = parts[-1]
    if _to_int(last_bit) is None:
        match = COUNT_IS_CHAR_RE.search(text) if count_is_char else None
        if match is not None:
            count = ord(match.group(1))
            char_count = True
        else:
            rkind = classify(last_bit)

    if rkind != ReleaseKind.STABLE:
        tail = _LAST_LETTER_RE.search(text).group(1)
        count = 1 if not tail else _to_int(tail)

    semver = Semver(major=major, minor=minor, patch=patch, ident=ident,
                    rkind=rkind, count=count, count_is_char=char_count)
    logger.debug("Parsed semver '%s' from '%s'", semver, raw)
    return semver


def format_semver(semver: Semver, count_is_char: Optional[bool] = None) -> str:
    """
    Render semver canonically, e.g. '1.0.0-rc2', '2.4p3' or '1.2b'.

    count_is_char says whether count is written as a character or a
    decimal number; by default the value's own count_is_char is used.
    """
    if count_is_char is None:
        count_is_char = semver.count_is_char
    s = str(semver.major)
    for part in (semver.minor, semver.patch, semver.ident):
        if part is not None:
            s += f".{part}"
    s += SUFFIXES[semver.rkind]
    if semver.count is not None:
        s += chr(semver.count) if count_is_char else str(semver.count)
    return s

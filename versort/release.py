"""
Release kinds and the heuristics that recognize them.

A release marker is the free text trailing the numeric part of a version,
e.g. the 'rc2' of '1.0.0-rc2'. Each kind has its own small predicate over
that (normalized) trailing token; classify() tries them in a fixed
priority order and the first match wins.
"""

import enum
import re


class ReleaseKind(enum.IntEnum):
    """Ordered by rank: everything below STABLE is a pre-release."""
    DEV = 0
    PRE = 1
    NEXT = 2
    ALPHA = 3
    BETA = 4
    RELEASE_CANDIDATE = 5
    STABLE = 6
    PATCH = 7


# Text with a plausible release marker: a digit, an optional separator,
# then one of the known tokens. Single-letter tokens must follow a
# non-letter so that e.g. the 'a' inside 'beta' or 'java' doesn't count.
_RECOGNIZED_RE = re.compile(r"[0-9][-_.]?(dev|pre|next|alpha|[^a-z]a|beta|[^a-z]b|r?c|patch|[^a-z]p)")

# A single trailing letter after a non-letter, e.g. the 'b' of '1.2b'
COUNT_IS_CHAR_RE = re.compile(r"[^a-z]([a-z])$")

_ALPHA_RE = re.compile(r"(alpha|a)([0-9]+)?")
_BETA_RE = re.compile(r"(beta|b)([0-9]+)?")
_RC_RE = re.compile(r"(rc|c)([0-9]+)?")
_PATCH_RE = re.compile(r"(patch|p)([0-9]+)?")


def is_dev(token: str) -> bool:
    return "dev" in token


def is_pre(token: str) -> bool:
    return "pre" in token


def is_next(token: str) -> bool:
    return "next" in token


def is_alpha(token: str) -> bool:
    return _ALPHA_RE.fullmatch(token) is not None


def is_beta(token: str) -> bool:
    return _BETA_RE.fullmatch(token) is not None


def is_release_candidate(token: str) -> bool:
    """'rc' and a bare 'c' are equivalent spellings"""
    return _RC_RE.fullmatch(token) is not None


def is_patch(token: str) -> bool:
    return _PATCH_RE.fullmatch(token) is not None


# Priority order matters: 'predev' is DEV, 'prealpha' is PRE.
_PREDICATES = (
    (is_dev, ReleaseKind.DEV),
    (is_pre, ReleaseKind.PRE),
    (is_next, ReleaseKind.NEXT),
    (is_alpha, ReleaseKind.ALPHA),
    (is_beta, ReleaseKind.BETA),
    (is_release_candidate, ReleaseKind.RELEASE_CANDIDATE),
    (is_patch, ReleaseKind.PATCH),
)


def classify(token: str) -> ReleaseKind:
    """Return the ReleaseKind of a lower-case trailing token, STABLE if none matches."""
    for predicate, kind in _PREDICATES:
        if predicate(token):
            return kind
    return ReleaseKind.STABLE


def recognized(text: str, lenient: bool = False, count_is_char: bool = False) -> bool:
    """
    The recognition gate: does lower-case text containing letters look like
    a version with a release marker (or, in count_is_char mode, a trailing
    build letter)? lenient accepts anything.
    """
    if lenient:
        return True
    if count_is_char:
        return COUNT_IS_CHAR_RE.search(text) is not None
    return _RECOGNIZED_RE.search(text) is not None


# How format_semver() spells each kind
SUFFIXES = {
    ReleaseKind.DEV: "-dev",
    ReleaseKind.PRE: "-pre",
    ReleaseKind.NEXT: "-next",
    ReleaseKind.ALPHA: "-alpha",
    ReleaseKind.BETA: "-beta",
    ReleaseKind.RELEASE_CANDIDATE: "-rc",
    ReleaseKind.STABLE: "",
    ReleaseKind.PATCH: "p",
}

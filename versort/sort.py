"""
Sort a batch of version lines.

Every line is parsed before anything is rendered, so a run either fails
without output or produces the complete sorted list.
"""

import logging
from typing import Iterable, List, Tuple

from versort.common import VersortError
from versort.options import SortOptions
from versort.semver import Semver, SemverParseError, format_semver, parse_semver

logger = logging.getLogger(__name__)

Parsed = Tuple[str, Semver]


class UnparseableLineError(VersortError):
    def __init__(self, line: str, err: SemverParseError):
        super().__init__("Failed to parse '%s' into a semver: %s" % (line, err))
        self.line = line
        self.err = err


def read_versions(lines: Iterable[str], options: SortOptions = SortOptions()) -> List[Parsed]:
    """
    Parse each non-blank line, returning (line, Semver) pairs in input
    order. A line that fails to parse is dropped if options.ignore is set
    and raises UnparseableLineError otherwise.
    """
    parsed = []
    for line in lines:
        line = line.rstrip('\r\n')
        if not line.strip():
            continue
        try:
            semver = parse_semver(line, lenient=options.lenient, count_is_char=options.count_is_char)
        except SemverParseError as err:
            if not options.ignore:
                raise UnparseableLineError(line, err)
            logger.info("Ignoring '%s': %s", line, err)
            continue
        parsed.append((line, semver))
    return parsed


def sort_versions(parsed: Iterable[Parsed]) -> List[Parsed]:
    # stable: equal versions keep their input order
    return sorted(parsed, key=lambda pair: pair[1])


def render(parsed: Iterable[Parsed], options: SortOptions = SortOptions()) -> List[str]:
    if options.format:
        return [format_semver(semver) for _, semver in parsed]
    return [line for line, _ in parsed]


def versort(lines: Iterable[str], options: SortOptions = SortOptions()) -> List[str]:
    """Parse, sort and render lines according to options."""
    parsed = read_versions(lines, options)
    logger.debug("Sorting %d version(s)", len(parsed))
    return render(sort_versions(parsed), options)

from versort.common import VersortError
from versort.release import ReleaseKind
from versort.semver import (MissingMajorError, Semver, SemverParseError, UnrecognizedTextError,
                            format_semver, parse_semver)
from versort.version import VERSORT_VERSION_STRING as __version__

# $LicenseInfo:firstyear=2024&license=mit$
# Copyright (c) 2024, versort contributors
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
# $/LicenseInfo$

"""
Run options for a versort invocation.

The options are decided once, by the command-line driver, and then passed
explicitly to every parse and format call. Defaults may come from a file
in any LLSD serialization (normally llsd+xml), for instance:

    <llsd><map>
        <key>ignore</key><boolean>1</boolean>
        <key>count_is_char</key><boolean>0</boolean>
    </map></llsd>

Command-line flags can only switch an option on over those defaults.
"""

import logging
import os
from typing import NamedTuple, Optional

import llsd

from versort import common

logger = logging.getLogger(__name__)


class ConfigurationError(common.VersortError):
    pass


class SortOptions(NamedTuple):
    ignore: bool = False
    format: bool = False
    lenient: bool = False
    count_is_char: bool = False

    def merged(self, **flags) -> "SortOptions":
        """Return a copy with every truthy flag in flags switched on."""
        return self._replace(**{name: True for name, value in flags.items() if value})


OPTION_NAMES = SortOptions._fields


def config_file_from_environment() -> Optional[str]:
    return os.environ.get(common.VERSORT_CONFIG_FILE) or None


def load_options(path: str) -> SortOptions:
    """Read SortOptions defaults from the LLSD file at path."""
    try:
        with open(path, 'rb') as f:
            serialized = f.read()
    except OSError as err:
        raise ConfigurationError("cannot read configuration file '%s': %s" % (path, err))

    try:
        saved_data = llsd.parse(serialized)
    except llsd.LLSDParseError as err:
        raise ConfigurationError("configuration file '%s' is not valid LLSD: %s" % (path, err))

    if not isinstance(saved_data, dict):
        raise ConfigurationError("configuration file '%s' must contain a map, not %s"
                                 % (path, type(saved_data).__name__))

    unknown = sorted(set(saved_data) - set(OPTION_NAMES))
    if unknown:
        raise ConfigurationError("unknown option(s) in configuration file '%s': %s"
                                 % (path, ", ".join(unknown)))
    for name, value in saved_data.items():
        if not isinstance(value, bool):
            raise ConfigurationError("option '%s' in configuration file '%s' must be a boolean, not %r"
                                     % (name, path, value))

    options = SortOptions(**saved_data)
    logger.debug("Loaded %s from '%s'", options, path)
    return options


def save_options(options: SortOptions, path: str):
    """Write options to path as pretty-printed llsd+xml."""
    with open(path, 'wb') as f:
        f.write(llsd.format_pretty_xml(options._asdict()))
    logger.info("Saved options to '%s'", path)

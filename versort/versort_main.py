#!/usr/bin/env python3
"""
versort: sort version strings read from stdin, one per line.

    $ printf '1.0.0p1\n1.0.0\n1.0.0-rc1\n1.0.0-alpha\n' | versort
    1.0.0-alpha
    1.0.0-rc1
    1.0.0
    1.0.0p1
"""

import argparse
import logging
import os
import sys

from versort import common
from versort.common import VersortError
from versort.options import SortOptions, config_file_from_environment, load_options, save_options
from versort.sort import versort


class Version(argparse.Action):
    """
    The argparse action='version' action is almost good, but it produces its
    output on stderr instead of on stdout. We consider that a bug.
    """
    def __init__(self, option_strings, version=None,
                 dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS,
                 help="show program's version number and exit", **kwds):
        super(Version, self).__init__(option_strings=option_strings,
                                      dest=dest,
                                      default=default,
                                      nargs=0,
                                      help=help,
                                      **kwds)
        self.version = version

    def __call__(self, parser, namespace, values, option_string=None):
        formatter = parser._get_formatter()
        formatter.add_text(self.version or parser.version)
        print(formatter.format_help())
        parser.exit(message="")


class Versort(object):
    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog='versort',
            description='Sort version strings read from stdin in ascending version order, '
                        'e.g. 1.0.0-rc1 < 1.0.0 < 1.0.0p1.')

        self.parser.add_argument('-V', '--version', action=Version,
                                 version='%%(prog)s %s' % common.VERSORT_VERSION_STRING)

    def get_default_loglevel_from_environment(self):
        """
        Returns a default log level based on the VERSORT_LOGLEVEL environment variable
        """
        environment_level = os.environ.get(common.VERSORT_LOGLEVEL, '')

        if environment_level == '--quiet' or environment_level == '-q':
            return logging.ERROR
        elif environment_level == '':
            return logging.WARNING
        elif environment_level == '--verbose' or environment_level == '-v':
            return logging.INFO
        elif environment_level == '--debug' or environment_level == '-d':
            return logging.DEBUG
        else:
            raise VersortError("invalid %s value '%s'" % (common.VERSORT_LOGLEVEL, environment_level))

    def set_recursive_loglevel(self, logger, level):
        """
        Sets the logger level, and also saves the equivalent option argument
        in the VERSORT_LOGLEVEL environment variable so that versort runs
        later in the same pipeline script inherit it
        """
        logger.setLevel(level)

        if level == logging.ERROR:
            os.environ[common.VERSORT_LOGLEVEL] = '--quiet'
        elif level == logging.WARNING:
            os.environ[common.VERSORT_LOGLEVEL] = ''
        elif level == logging.INFO:
            os.environ[common.VERSORT_LOGLEVEL] = '--verbose'
        elif level == logging.DEBUG:
            os.environ[common.VERSORT_LOGLEVEL] = '--debug'
        else:
            raise VersortError("invalid effective log level %s" % logging.getLevelName(level))

    def register(self, default_loglevel):
        argdefs = (
            (('-i', '--ignore',),
                dict(help='drop lines that cannot be parsed instead of failing', action='store_true')),
            (('-f', '--format',),
                dict(help='print each version in canonical form instead of as given', action='store_true')),
            (('-l', '--lenient',),
                dict(help='accept any text after the version numbers, not just known release markers',
                     action='store_true')),
            (('-c', '--count-is-char', '--charcount',),
                dict(help='read a single trailing letter (1.2a, 1.2b, ...) as a build counter',
                     action='store_true', dest='count_is_char')),
            (('--config-file',),
                dict(default=config_file_from_environment(), dest='config_file',
                     help='LLSD file of option defaults (defaults to $%s)' % common.VERSORT_CONFIG_FILE)),
            (('--save-config',),
                dict(default=None, dest='save_config', metavar='PATH',
                     help='write the effective options to PATH and exit without sorting')),

            ## NOTE: if the mapping of verbosity controls (--{quiet,verbose,debug})
            ##       is changed here, it must be changed to match in set_recursive_loglevel
            ##       and get_default_loglevel_from_environment methods above.
            (('-q', '--quiet',),
             dict(help='minimal output', action='store_const',
                  const=logging.ERROR, dest='logging_level', default=default_loglevel)),
            (('-v', '--verbose',),
             dict(help='verbose output', action='store_const', const=logging.INFO, dest='logging_level')),
            (('-d', '--debug',),
             dict(help='debug output', action='store_const', const=logging.DEBUG, dest='logging_level')),
        )
        for args, kwds in argdefs:
            self.parser.add_argument(*args, **kwds)

    def options_from_args(self, args):
        options = load_options(args.config_file) if args.config_file else SortOptions()
        return options.merged(ignore=args.ignore,
                              format=args.format,
                              lenient=args.lenient,
                              count_is_char=args.count_is_char)

    def main(self, args_in, stdin=None, stdout=None):
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout

        logger = logging.getLogger('versort')
        if not logger.handlers:
            logger.addHandler(logging.StreamHandler())

        self.register(self.get_default_loglevel_from_environment())
        args = self.parser.parse_args(args_in)
        self.set_recursive_loglevel(logger, args.logging_level)

        options = self.options_from_args(args)
        logger.debug("options: %r", options)

        if args.save_config:
            save_options(options, args.save_config)
            return 0

        lines = versort(stdin, options)
        if lines:
            stdout.write("\n".join(lines) + "\n")
        return 0


def main():
    logger = logging.getLogger('versort')
    try:
        sys.exit(Versort().main(sys.argv[1:]))
    except KeyboardInterrupt:
        sys.exit("Aborted...")
    except common.VersortError as e:
        if logger.getEffectiveLevel() <= logging.DEBUG:
            logger.exception(str(e))
        msg = ["ERROR: ", str(e)]
        if logger.getEffectiveLevel() > logging.DEBUG:
            msg.append("\nFor more information: try re-running your command with")
            if logger.getEffectiveLevel() > logging.INFO:
                msg.append(" --verbose or")
            msg.append(" --debug")
        sys.exit(''.join(msg))


if __name__ == "__main__":
    main()

import argparse
import logging
import platform
import sys
from .. import __version__
from ..binutils.toolchain import Toolchain, DEFAULT_PREFIX
from ..common import logformat, QuickAsmError


version_text = 'quickasm version {}'.format(__version__)

logger = logging.getLogger('quickasm')


class ArgumentParser(argparse.ArgumentParser):
    """ Argument parser that exits with status 1 on bad arguments """
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, '{}: error: {}\n'.format(self.prog, message))


def log_level(s):
    """ Converts a string to a valid logging level """
    numeric_level = getattr(logging, s.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError('Invalid log level: {}'.format(s))
    return numeric_level


class OnceAction(argparse.Action):
    """ Use this action to enforce that an option is only given once """
    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(self, 'Cannot give multiple')
        setattr(namespace, self.dest, values)


base_parser = argparse.ArgumentParser(add_help=False)
base_parser.add_argument(
    '--log', help='Log level (debug,info,warning,error)', metavar='log-level',
    type=log_level, default='warning')
base_parser.add_argument(
    '--verbose', '-V', action='count', default=0,
    help='Show additional information while running')
base_parser.add_argument(
    '--version', '-v', action='version', version=version_text,
    help='Show version number')


toolchain_parser = argparse.ArgumentParser(add_help=False)
toolchain_parser.add_argument(
    '--prefix', '-p', help='Set GNU toolchain prefix', default=DEFAULT_PREFIX)
toolchain_parser.add_argument(
    '--machine', '-m', help='Set machine type for disassembly',
    action=OnceAction)
toolchain_parser.add_argument(
    '--aa', dest='as_args', metavar='arg', default=[], action='append',
    help='Additional argument for the assembler, may be passed multiple '
         'times')
toolchain_parser.add_argument(
    '--la', dest='ld_args', metavar='arg', default=[], action='append',
    help='Additional argument for the linker, may be passed multiple times')


def get_toolchain_from_args(args):
    """ Determine the toolchain to use from the parsed arguments """
    return Toolchain(
        prefix=args.prefix, machine=args.machine,
        as_args=args.as_args, ld_args=args.ld_args)


class ColoredFormatter(logging.Formatter):
    """ Custom formatter that makes vt100 coloring to log messages """
    BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)
    colors = {
        'INFO': WHITE,
        'WARNING': YELLOW,
        'ERROR': RED
    }

    def format(self, record):
        reset_seq = '\033[0m'
        color_seq = '\033[1;%dm'
        levelname = record.levelname
        msg = super().format(record)
        if levelname in self.colors:
            color = color_seq % (30 + self.colors[levelname])
            msg = color + msg + reset_seq
        return msg


class LogSetup:
    """ Context manager that attaches logging to a snippet.

    Errors from the pipelines are reported here and turned into exit
    status 1.
    """
    def __init__(self, args):
        self.args = args
        self.console_handler = None
        self.logger = logging.getLogger()

    def __enter__(self):
        self.logger.setLevel(logging.DEBUG)
        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(ColoredFormatter(logformat))
        self.console_handler.setLevel(self.args.log)
        self.logger.addHandler(self.console_handler)

        if self.args.verbose > 0:
            self.console_handler.setLevel(logging.DEBUG)

        self.logger.debug('Loggers attached')
        self.logger.debug(
            '%s on %s %s', version_text, platform.python_implementation(),
            platform.python_version())
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if isinstance(exc_value, QuickAsmError):
            logger.error(str(exc_value.msg))
            details = exc_value.details()
            if details:
                print(details, file=sys.stderr)
            err = True
        else:
            err = False

        self.logger.debug('Removing loggers')
        self.logger.removeHandler(self.console_handler)

        # exit code when error:
        if err:
            sys.exit(1)

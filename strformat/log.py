import colorama
import logging
import os
import traceback
import warnings
from colorama import Back, Fore, Style
from logging import getLogger, DEBUG, ERROR, WARNING  # noqa: F401
from traceback import FrameSummary

_package_dir = os.path.dirname(os.path.abspath(__file__))


def _relpath(path):
    try:
        return os.path.relpath(path)
    except ValueError:
        # `path` is on a different drive from the current directory.
        return path


def _in_package(filename):
    try:
        rel = os.path.relpath(filename, _package_dir)
    except ValueError:
        return False
    return not rel.startswith(os.pardir + os.sep)


def split_stack(stack):
    """Split `stack` at the first frame inside strformat, returning the frames
    of whoever called in (e.g. the code passing a bad format string to
    `strformat.format`) and the frames from there on. Anything strformat calls
    back out to, like an argument's `__str__`, stays with the latter."""

    for i, frame in enumerate(stack):
        if _in_package(frame.filename):
            return list(stack[:i]), list(stack[i:])
    return list(stack), []


def _format_stack(stack, relative=False):
    if len(stack) == 0:
        return ''

    if relative:
        stack = [FrameSummary(_relpath(i.filename), i.lineno, i.name,
                              line=i.line) for i in stack]

    # Put the newline at the beginning, since this helps our formatting later.
    return '\n' + ''.join(traceback.format_list(stack)).rstrip()


class ColoredStreamHandler(logging.StreamHandler):
    _level_colors = {
        DEBUG: Style.BRIGHT + Fore.MAGENTA,
        logging.INFO: Style.BRIGHT + Fore.BLUE,
        WARNING: Style.BRIGHT + Fore.YELLOW,
        ERROR: Style.BRIGHT + Fore.RED,
        logging.CRITICAL: Style.BRIGHT + Back.RED + Fore.WHITE,
    }

    def colored_level(self, record):
        return '{}{}{}'.format(
            self._level_colors.get(record.levelno, Style.BRIGHT),
            record.levelname.lower(), Style.RESET_ALL
        )

    def format(self, record):
        record.coloredlevel = self.colored_level(record)
        return super().format(record)


class CallerStreamHandler(ColoredStreamHandler):
    """Log records that carry a stack (an exception or `log_stack`) under the
    file and line of the code that called into strformat. The frames inside
    strformat are only shown when debugging."""

    def __init__(self, stream=None, debug=False):
        super().__init__(stream)
        self.debug = debug
        self.setFormatter(logging.Formatter('%(coloredlevel)s: %(message)s'))

        fmt = ('%(coloredlevel)s: %(caller_pathname)s:%(caller_lineno)d: ' +
               '%(message)s%(caller_stack)s')
        if debug:
            fmt += Fore.LIGHTBLACK_EX + '%(internal_stack)s' + Style.RESET_ALL
        self.stack_formatter = logging.Formatter(fmt)

    def format(self, record):
        if record.exc_info and record.exc_info[0]:
            name = record.exc_info[0].__name__
            if not record.msg:
                record.msg = name
            elif self.debug:
                record.msg = '{}: {}'.format(name, record.msg)
            record.full_stack = traceback.extract_tb(record.exc_info[2])
            record.exc_info = None

        caller, internal = split_stack(getattr(record, 'full_stack', []))
        # An error raised entirely within strformat (e.g. a bad format string
        # from the command line) has no caller worth pointing at.
        if ( not getattr(record, 'show_stack', True) or
             not (caller or (self.debug and internal))):
            return super().format(record)

        if caller:
            record.caller_pathname = _relpath(caller[-1].filename)
            record.caller_lineno = caller[-1].lineno
        else:
            record.caller_pathname = _relpath(record.pathname)
            record.caller_lineno = record.lineno
        record.caller_stack = _format_stack(caller, relative=True)
        record.internal_stack = _format_stack(internal)
        record.coloredlevel = self.colored_level(record)
        return self.stack_formatter.format(record)


def _clicolor(environ):
    if environ.get('CLICOLOR_FORCE', '0') != '0':
        return 'always'
    if 'CLICOLOR' in environ:
        return 'never' if environ['CLICOLOR'] == '0' else 'auto'
    return None


def _init_logging(logger, debug, stream=None):
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(CallerStreamHandler(stream, debug=debug))


def init(color='auto', debug=False, environ=os.environ):
    color = _clicolor(environ) or color
    if color == 'always':
        colorama.init(strip=False)
    elif color == 'never':
        colorama.init(strip=True, convert=False)
    else:  # color == 'auto'
        colorama.init()

    warnings.showwarning = _showwarning
    _init_logging(logging.root, debug)


def log_stack(level, message, *args, logger=logging, stacklevel=0,
              show_stack=True, **kwargs):
    extra = {
        'full_stack': traceback.extract_stack()[1:-1 - stacklevel],
        'show_stack': show_stack
    }
    logger.log(level, message, *args, extra=extra, **kwargs)


def format_message(*args):
    return ' '.join(str(i) for i in args)


def log_message(level, *args, logger=logging, stacklevel=0, **kwargs):
    stacklevel += 1
    log_stack(level, format_message(*args), logger=logger,
              stacklevel=stacklevel, **kwargs)


def _showwarning(message, category, filename, lineno, file=None, line=None):
    log_stack(WARNING, message, stacklevel=2)

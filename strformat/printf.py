import sys

from . import log
from .app_version import version
from .arguments import parser as argparse
from .driver import format
from .exceptions import FormatError
from .stringify import encode

logger = log.getLogger(__name__)

description = """
Print ARGS according to FORMAT, as in C printf. FORMAT is reused as long as
there are ARGS remaining.
"""


def _warn_unused(unused):
    log.log_message(log.WARNING, 'ignoring', len(unused),
                    'unused argument(s):', ', '.join(repr(i) for i in unused),
                    logger=logger, show_stack=False)


def _write(text):
    # Raw bytes (from `%c` or undecodable arguments) are held as surrogate
    # escapes, so write the encoded text when stdout takes bytes.
    stream = getattr(sys.stdout, 'buffer', None)
    if stream is None:
        sys.stdout.write(text)
    else:
        sys.stdout.flush()
        stream.write(encode(text))
        stream.flush()


def format_each(template, args, once=False):
    """Apply `template` to `args` repeatedly until they're all consumed,
    yielding the text of each pass."""

    while True:
        result = format(template, *args)
        yield result.text
        if not result.unused:
            return

        # Stop if this pass didn't consume anything, since the next one won't
        # either.
        if once or result.unused_count == len(args):
            _warn_unused(result.unused)
            return
        args = result.unused


def main():
    parser = argparse.ArgumentParser(
        prog='strformat-printf',
        description=description
    )

    parser.add_argument('format', metavar='FORMAT', type='escaped_str',
                        help='controls the output as in C printf')
    parser.add_argument('args', metavar='ARGS', nargs='*',
                        help='arguments to print according to FORMAT')
    parser.add_argument('--once', action='store_true',
                        help='apply FORMAT only once, ignoring extra ARGS')
    parser.add_argument('--color', metavar='WHEN', default='auto',
                        choices=['always', 'never', 'auto'],
                        help=('show colored log output (one of: %(choices)s;' +
                              ' default: %(default)s)'))
    parser.add_argument('--debug', action='store_true',
                        help='report extra information for debugging')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + version)

    args = parser.parse_args()
    log.init(args.color, debug=args.debug)

    try:
        for text in format_each(args.format, args.args, once=args.once):
            _write(text)
    except FormatError as e:
        logger.error(e, exc_info=args.debug)
        return 1
    return 0

from collections import namedtuple

from . import log
from .directive import ArgumentStream, Directive, parse
from .formatter import format_directive

__all__ = ['format', 'format_arguments', 'FormatResult']

logger = log.getLogger(__name__)

FormatResult = namedtuple('FormatResult', ['text', 'unused', 'unused_count'])


def format_arguments(template, args, errno=None):
    """Format `template` with `args`, returning the text and the number of
    arguments consumed."""

    stream = ArgumentStream(args)
    segments = []
    for i in parse(template, stream):
        if isinstance(i, Directive):
            segments.append(format_directive(i, errno=errno))
        else:
            segments.append(i)
    return ''.join(segments), stream.cursor


def format(template, *args, errno=None):
    """Format `template` printf-style.

    Returns a `FormatResult`; if any trailing arguments weren't needed by the
    template, they're returned (in order) in `unused` along with their count
    in `unused_count`. Otherwise, both of those are `None`.

    `errno` is the error number described by `%m`; by default, this is taken
    from the `OSError` currently being handled, if any."""

    text, cursor = format_arguments(template, args, errno=errno)
    unused = list(args[cursor:])
    if not unused:
        return FormatResult(text, None, None)

    logger.debug('%d unused argument(s) for format string %r', len(unused),
                 template)
    return FormatResult(text, unused, len(unused))

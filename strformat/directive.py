from collections import namedtuple

from .coerce import to_count
from .exceptions import (DirectiveTooLongError, InsufficientArgumentsError,
                         UnsupportedConversionError)

__all__ = ['Argument', 'ArgumentStream', 'CONVERSIONS', 'Directive',
           'DirectiveBuffer', 'FLAGS', 'LENGTH_MODIFIERS',
           'MAX_DIRECTIVE_SIZE', 'parse']

MAX_DIRECTIVE_SIZE = 255

FLAGS = "#0- +'"
DIGITS = '0123456789'
LENGTH_MODIFIERS = ('hh', 'h', 'll', 'l', 'j', 'z', 't', 'L')
CONVERSIONS = 'diouxXeEfFgGaAcspqm'

Argument = namedtuple('Argument', ['value', 'position'])


class ArgumentStream:
    def __init__(self, values):
        self.values = values
        self.cursor = 0

    def take(self, directive):
        if self.cursor >= len(self.values):
            raise InsufficientArgumentsError(directive)
        value = self.values[self.cursor]
        self.cursor += 1
        return Argument(value, self.cursor)


class DirectiveBuffer:
    def __init__(self, size=MAX_DIRECTIVE_SIZE):
        self.size = size
        self._bits = []
        self._length = 0

    def __len__(self):
        return self._length

    def __str__(self):
        return ''.join(self._bits)

    def append(self, s):
        # Leave room for a terminator, like a fixed-size C buffer would.
        if self._length + len(s) >= self.size:
            raise DirectiveTooLongError(str(self) + s, self.size)
        self._bits.append(s)
        self._length += len(s)


class Directive:
    def __init__(self, text, flags='', width=None, precision=None, length='',
                 conversion='s', argument=None):
        self.text = text
        self.flags = flags
        self.width = width
        self.precision = precision
        self.length = length
        self.conversion = conversion
        self.argument = argument

    @property
    def has_modifiers(self):
        return self.text != '%' + self.conversion

    @property
    def value(self):
        return self.argument.value if self.argument else None

    @property
    def argno(self):
        return self.argument.position if self.argument else None

    def __eq__(self, rhs):
        if type(self) is not type(rhs):
            return NotImplemented
        return (self.text == rhs.text and self.flags == rhs.flags and
                self.width == rhs.width and
                self.precision == rhs.precision and
                self.length == rhs.length and
                self.conversion == rhs.conversion and
                self.argument == rhs.argument)

    def __ne__(self, rhs):
        return not (self == rhs)

    def __repr__(self):
        return '<Directive({!r})>'.format(self.text)


class _Scanner:
    def __init__(self, template):
        self.template = template
        self.pos = 0

    @property
    def done(self):
        return self.pos >= len(self.template)

    def peek(self, n=1):
        return self.template[self.pos:self.pos + n]

    def accept(self, chars):
        c = self.peek()
        if c and c in chars:
            self.pos += 1
            return c
        return ''

    def accept_run(self, chars):
        start = self.pos
        while self.accept(chars):
            pass
        return self.template[start:self.pos]

    def accept_any(self, words):
        for i in words:
            if self.peek(len(i)) == i:
                self.pos += len(i)
                return i
        return ''

    def literal(self):
        end = self.template.find('%', self.pos)
        if end == -1:
            end = len(self.template)
        start, self.pos = self.pos, end
        return self.template[start:end]


def _parse_count(scanner, parts, stream, start):
    if scanner.accept('*'):
        text = scanner.template[start:scanner.pos]
        value, argno = stream.take(text)
        count = to_count(value, argno, text)
        parts.append(str(count))
        return count, True

    digits = scanner.accept_run(DIGITS)
    parts.append(digits)
    return (int(digits) if digits else None), False


def _parse_directive(scanner, stream):
    start = scanner.pos
    scanner.accept('%')

    flags = scanner.accept_run(FLAGS)
    parts = ['%' + flags]

    width, dynamic = _parse_count(scanner, parts, stream, start)
    if dynamic and width < 0:
        # A negative width from an argument means left-justification.
        flags += '-'
        width = -width

    precision = None
    if scanner.accept('.'):
        parts.append('.')
        precision, dynamic = _parse_count(scanner, parts, stream, start)
        if precision is None:
            precision = 0
        elif dynamic and precision < 0:
            precision = None

    length = scanner.accept_any(LENGTH_MODIFIERS)
    conversion = scanner.accept(CONVERSIONS)
    if not conversion:
        raise UnsupportedConversionError(scanner.peek(), scanner.template)
    parts.append(length + conversion)

    # The conversion is checked first, so a bad type is reported even when
    # the directive is also too long.
    buf = DirectiveBuffer()
    for i in parts:
        buf.append(i)

    directive = Directive(str(buf), flags, width, precision, length,
                          conversion)
    if conversion != 'm':
        directive.argument = stream.take(directive.text)
    return directive


def parse(template, stream):
    """Scan `template`, yielding literal strings and `Directive`s in order.

    Values are taken from `stream` as each directive is reached: first any
    `*` width and precision, then the directive's own value (except for
    `%m`)."""

    if not isinstance(template, str):
        raise TypeError('expected a string')

    scanner = _Scanner(template)
    while not scanner.done:
        text = scanner.literal()
        if scanner.peek(2) == '%%':
            scanner.pos += 2
            yield text + '%'
            continue

        if text:
            yield text
        if not scanner.done:
            yield _parse_directive(scanner, stream)

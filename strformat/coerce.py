import math
from numbers import Integral, Real

from .exceptions import ArgumentTypeMismatchError
from .stringify import encode, kind_name

__all__ = ['INTEGER_BITS', 'parse_number', 'to_char', 'to_count', 'to_float',
           'to_integer']

# Integers are limited to the range of a signed integer of this many bits.
INTEGER_BITS = 64

_min_integer = -(1 << (INTEGER_BITS - 1))
_max_integer = (1 << (INTEGER_BITS - 1)) - 1


def parse_number(s):
    """Parse a numeric string (decimal, `0x` hex or floating-point) the way a
    Lua-style coercion would, returning `None` if it isn't a number. Python's
    own extensions (digit separators and named values like `inf`) aren't
    numbers here."""

    if isinstance(s, (bytes, bytearray)):
        try:
            s = s.decode('ascii')
        except UnicodeDecodeError:
            return None

    s = s.strip()
    if '_' in s:
        return None
    try:
        return int(s, 10)
    except ValueError:
        pass

    unsigned = s.lstrip('+-')
    if unsigned[:2].lower() == '0x':
        try:
            return int(s, 16)
        except ValueError:
            return None
    if unsigned[:1] not in '0123456789.' or not unsigned:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def _number(value, argno, directive, allow_bool):
    if isinstance(value, bool):
        if allow_bool:
            return int(value)
    elif isinstance(value, Real):
        return value
    elif isinstance(value, (str, bytes, bytearray)):
        n = parse_number(value)
        if n is not None:
            return n

    raise ArgumentTypeMismatchError(argno, directive, 'number expected, got {}'
                                    .format(kind_name(value)))


def to_float(value, argno, directive):
    return float(_number(value, argno, directive, allow_bool=False))


def to_integer(value, argno, directive):
    n = _number(value, argno, directive, allow_bool=True)
    if not isinstance(n, Integral):
        if not (math.isfinite(n) and float(n).is_integer()):
            n = None
    if n is None or not _min_integer <= n <= _max_integer:
        raise ArgumentTypeMismatchError(
            argno, directive, 'number has no integer representation'
        )
    return int(n)


def to_count(value, argno, directive):
    # Like a C cast to int, this just truncates any fractional part.
    n = _number(value, argno, directive, allow_bool=True)
    if not math.isfinite(n):
        raise ArgumentTypeMismatchError(argno, directive,
                                        'number has no integer representation')
    return int(n)


def _byte_char(b):
    # Bytes outside ASCII come back as the same escapes `stringify` uses, so
    # they're written out as the original byte.
    return bytes([b]).decode('utf-8', 'surrogateescape')


def to_char(value, argno, directive):
    """Coerce `value` to the single byte printed by `%c`: a string of at most
    one byte (empty meaning NUL), or an integer byte value from 0 to 255."""

    if isinstance(value, str):
        value = encode(value)
    if isinstance(value, (bytes, bytearray)):
        if len(value) > 1:
            raise ArgumentTypeMismatchError(argno, directive,
                                            'string length <=1 expected')
        return _byte_char(value[0]) if value else '\0'
    elif isinstance(value, bool):
        raise ArgumentTypeMismatchError(argno, directive,
                                        'number expected, got boolean')

    code = to_integer(value, argno, directive)
    if not 0 <= code <= 0xFF:
        raise ArgumentTypeMismatchError(argno, directive,
                                        'character code out of range')
    return _byte_char(code)

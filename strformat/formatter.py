import os
import sys

from . import native
from .coerce import to_char, to_float, to_integer
from .exceptions import ModifierNotAllowedError, NativeFormattingError
from .quote import quote
from .stringify import identity_token, stringify

__all__ = ['error_text', 'format_directive']

_formatters = {}


def _formatter(conversions):
    def wrapper(fn):
        for i in conversions:
            _formatters[i] = fn
        return fn
    return wrapper


def _native(directive, fn, *args, **kwargs):
    try:
        return fn(directive, *args, **kwargs)
    except (ValueError, OverflowError) as e:
        raise NativeFormattingError(directive.text, e) from e


def error_text(errno=None):
    if errno is None:
        e = sys.exc_info()[1]
        if isinstance(e, OSError):
            errno = e.errno
    return os.strerror(errno or 0)


@_formatter('diouxX')
def _format_integer(directive, errno):
    value = to_integer(directive.value, directive.argno, directive.text)
    return _native(directive, native.format_integer, value)


@_formatter('c')
def _format_char(directive, errno):
    char = to_char(directive.value, directive.argno, directive.text)
    return _native(directive, native.format_text, char, truncate=False)


@_formatter('eEfFgG')
def _format_float(directive, errno):
    value = to_float(directive.value, directive.argno, directive.text)
    return _native(directive, native.format_float, value)


@_formatter('aA')
def _format_hexfloat(directive, errno):
    value = to_float(directive.value, directive.argno, directive.text)
    return _native(directive, native.format_hexfloat, value)


@_formatter('s')
def _format_string(directive, errno):
    return _native(directive, native.format_text, stringify(directive.value))


@_formatter('p')
def _format_pointer(directive, errno):
    return _native(directive, native.format_text,
                   identity_token(directive.value), truncate=False)


@_formatter('q')
def _format_quoted(directive, errno):
    # `%q` takes no flags, width, precision or length modifier.
    if directive.has_modifiers:
        raise ModifierNotAllowedError(directive.text)
    return quote(directive.value)


@_formatter('m')
def _format_error(directive, errno):
    return error_text(errno)


def format_directive(directive, errno=None):
    return _formatters[directive.conversion](directive, errno)

from .stringify import encode, stringify
from .utf8 import char_length, REPLACEMENT_CHAR

__all__ = ['quote', 'quote_bytes']

_named_escapes = {
    0x00: '\\0',
    0x07: '\\a',
    0x08: '\\b',
    0x09: '\\t',
    0x0A: '\\n',
    0x0B: '\\v',
    0x0C: '\\f',
    0x0D: '\\r',
}

_digits = frozenset(b'0123456789')


def _iscntrl(b):
    return b < 0x20 or b == 0x7F


def _escape_byte(data, pos):
    b = data[pos]
    if b == ord('"') or b == ord('\\'):
        return '\\' + chr(b)
    elif not _iscntrl(b):
        return chr(b)
    elif b in _named_escapes:
        return _named_escapes[b]

    # A short numeric escape followed by a digit would read as one number, so
    # pad it out to the full three digits in that case.
    if pos + 1 < len(data) and data[pos + 1] in _digits:
        return '\\{:03d}'.format(b)
    return '\\{:d}'.format(b)


def quote_bytes(data):
    result = ['"']
    pos = 0
    while pos < len(data):
        n = char_length(data, pos)
        if n < 0:
            result.append(REPLACEMENT_CHAR)
            pos -= n
        elif n > 1:
            result.append(data[pos:pos + n].decode('utf-8'))
            pos += n
        else:
            result.append(_escape_byte(data, pos))
            pos += 1
    result.append('"')
    return ''.join(result)


def quote(value):
    return quote_bytes(encode(stringify(value)))

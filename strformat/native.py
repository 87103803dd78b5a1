import math
import re

__all__ = ['format_float', 'format_hexfloat', 'format_integer',
           'format_text', 'UNSIGNED_BITS']

# The width of the host's native integers; values given to an unsigned
# conversion wrap around modulo this.
UNSIGNED_BITS = 64

_radix_formats = {
    'd': 'd', 'i': 'd', 'u': 'd', 'o': 'o', 'x': 'x', 'X': 'X',
}

_hexfloat_ex = re.compile(r'^-?0x([01])\.([0-9a-f]+)p([+-]\d+)$')


def _sign(negative, flags):
    if negative:
        return '-'
    elif '+' in flags:
        return '+'
    elif ' ' in flags:
        return ' '
    return ''


def _justify(flags, width, sign, prefix, body, zero_pad=True):
    size = len(sign) + len(prefix) + len(body)
    if width is None or width <= size:
        return sign + prefix + body

    fill = width - size
    if '-' in flags:
        return sign + prefix + body + ' ' * fill
    elif '0' in flags and zero_pad:
        return sign + prefix + '0' * fill + body
    return ' ' * fill + sign + prefix + body


def _percent_spec(flags, width, precision, conversion):
    # Python's `%` operator understands everything in a C directive except
    # the grouping flag and the length modifiers.
    spec = '%' + ''.join(i for i in '-+ #0' if i in flags)
    if width is not None:
        spec += str(width)
    if precision is not None:
        spec += '.' + str(precision)
    return spec + conversion


def format_integer(directive, value):
    conversion, flags = directive.conversion, directive.flags
    precision = directive.precision

    if conversion in 'di':
        sign = _sign(value < 0, flags)
        magnitude = abs(value)
    else:
        sign = ''
        magnitude = value % (1 << UNSIGNED_BITS)

    if precision == 0 and magnitude == 0:
        digits = ''
    else:
        digits = format(magnitude, _radix_formats[conversion])
        if precision is not None:
            digits = digits.zfill(precision)

    prefix = ''
    if '#' in flags:
        if conversion == 'o' and not digits.startswith('0'):
            digits = '0' + digits
        elif conversion in 'xX' and magnitude:
            prefix = '0' + conversion

    return _justify(flags, directive.width, sign, prefix, digits,
                    zero_pad=precision is None)


def format_float(directive, value):
    spec = _percent_spec(directive.flags, directive.width,
                         directive.precision, directive.conversion)
    return spec % value


def _round_hex_digits(lead, fraction, precision):
    # Round to `precision` hex digits, with ties going to even.
    shift = 4 * (len(fraction) - precision)
    quotient, remainder = divmod(int(lead + fraction, 16), 1 << shift)
    half = 1 << (shift - 1)
    if remainder > half or (remainder == half and quotient & 1):
        quotient += 1
    return divmod(quotient, 1 << (4 * precision))


def format_hexfloat(directive, value):
    flags, precision = directive.flags, directive.precision
    upper = directive.conversion == 'A'
    sign = _sign(math.copysign(1.0, value) < 0, flags)

    if math.isinf(value) or math.isnan(value):
        body = 'inf' if math.isinf(value) else 'nan'
        return _justify(flags, directive.width, sign, '',
                        body.upper() if upper else body, zero_pad=False)

    m = _hexfloat_ex.match(value.hex())
    lead, fraction, exponent = m.group(1), m.group(2), int(m.group(3))

    if precision is None:
        fraction = fraction.rstrip('0')
    elif precision < len(fraction):
        # Like glibc, a carry out of the fraction just bumps the leading digit
        # (e.g. 0x2p+0) rather than renormalizing.
        leading, rest = _round_hex_digits(lead, fraction, precision)
        lead = '{:x}'.format(leading)
        fraction = '{:0{}x}'.format(rest, precision) if precision else ''
    else:
        fraction = fraction.ljust(precision, '0')

    body = lead
    if fraction or '#' in flags:
        body += '.' + fraction
    body += 'p{:+d}'.format(exponent)

    prefix = '0x'
    if upper:
        prefix, body = prefix.upper(), body.upper()
    return _justify(flags, directive.width, sign, prefix, body)


def format_text(directive, text, truncate=True):
    # Only `-` and the width matter for text; C ignores the precision of
    # single characters and pointers.
    precision = directive.precision if truncate else None
    spec = _percent_spec(directive.flags.replace('0', ''), directive.width,
                         precision, 's')
    return spec % text

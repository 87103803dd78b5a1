from numbers import Number

__all__ = ['encode', 'has_identity', 'identity_token', 'kind_name',
           'stringify']


def kind_name(value):
    if value is None:
        return 'nil'
    elif isinstance(value, bool):
        return 'boolean'
    elif isinstance(value, Number):
        return 'number'
    elif isinstance(value, (str, bytes, bytearray)):
        return 'string'
    return type(value).__name__


def has_identity(value):
    return not (value is None or isinstance(value, Number))


def identity_token(value):
    if not has_identity(value):
        return '(nil)'
    return '0x{:x}'.format(id(value))


def _describes_itself(value):
    # Containers, functions and the like only inherit `object.__str__`, which
    # just gives their repr; those are rendered as opaque references instead.
    return type(value).__str__ is not object.__str__


def stringify(value):
    if value is None:
        return 'nil'
    elif isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('utf-8', 'surrogateescape')
    elif isinstance(value, (str, Number)) or _describes_itself(value):
        return str(value)
    return '{}: {}'.format(kind_name(value), identity_token(value))


def encode(text):
    try:
        # Get back the original bytes of anything decoded by `stringify`.
        return text.encode('utf-8', 'surrogateescape')
    except UnicodeEncodeError:
        # Other lone surrogates come out malformed, which is what they are.
        return text.encode('utf-8', 'surrogatepass')

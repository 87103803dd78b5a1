__all__ = ['char_length', 'is_lead_byte', 'is_tail_byte', 'REPLACEMENT_CHAR']

REPLACEMENT_CHAR = '\ufffd'

# Table 3-7, "Well-Formed UTF-8 Byte Sequences", of the Unicode Standard. Each
# lead byte maps to the total length of its sequence and the range allowed for
# the second byte; the remaining bytes are always plain tails (80-BF). Lead
# bytes missing from this table (80-C1, F5-FF) are never valid.
_tail_range = (0x80, 0xBF)
_sequences = {}
_sequences.update((i, (2, _tail_range)) for i in range(0xC2, 0xE0))
_sequences.update((i, (3, _tail_range)) for i in range(0xE1, 0xF0))
_sequences.update((i, (4, _tail_range)) for i in range(0xF1, 0xF4))
_sequences.update({
    0xE0: (3, (0xA0, 0xBF)),
    0xED: (3, (0x80, 0x9F)),  # Excludes the UTF-16 surrogates.
    0xF0: (4, (0x90, 0xBF)),
    0xF4: (4, (0x80, 0x8F)),  # Nothing above U+10FFFF.
})


def is_lead_byte(b):
    return b <= 0x7F or 0xC2 <= b <= 0xF4


def is_tail_byte(b):
    return b & 0xC0 == 0x80


def _byte_at(data, pos):
    # Treat everything past the end as a NUL terminator. Since NUL is a lead
    # byte, recovery from a truncated sequence never skips past the end.
    return data[pos] if pos < len(data) else 0


def char_length(data, pos=0):
    """Return the length of the UTF-8 character starting at `data[pos]`.

    If the bytes there aren't a well-formed sequence, return a negative
    number whose magnitude is how many bytes to skip before decoding can
    resume: this stops at the first byte that could start a new character, so
    a valid character following a truncated one is never swallowed."""

    lead = _byte_at(data, pos)
    if lead <= 0x7F:
        return 1
    if lead not in _sequences:
        return -1

    length, (low, high) = _sequences[lead]
    second = _byte_at(data, pos + 1)
    if low <= second <= high and all(is_tail_byte(_byte_at(data, pos + i))
                                     for i in range(2, length)):
        return length

    for i in range(1, length):
        if is_lead_byte(_byte_at(data, pos + i)):
            return -i
    return -length

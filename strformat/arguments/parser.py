from argparse import *

_ArgumentParser = ArgumentParser


def escaped_str(s):
    # Characters outside Latin-1 survive the trip through `unicode-escape` as
    # `\uXXXX` sequences.
    try:
        return (s.encode('latin-1', 'backslashreplace')
                 .decode('unicode-escape'))
    except UnicodeDecodeError as e:
        raise ArgumentTypeError('invalid escape sequence in {!r}: {}'
                                .format(s, e.reason))


class ArgumentParser(_ArgumentParser):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.register('type', 'escaped_str', escaped_str)

    def _get_option_tuples(self, option_string):
        # Don't try to check prefixes for long options; this is similar to
        # Python 3.5's `allow_abbrev=False`, except this doesn't break combined
        # short options. See <https://bugs.python.org/issue26967>.
        if option_string[:2] == self.prefix_chars * 2:
            return []

        return super()._get_option_tuples(option_string)

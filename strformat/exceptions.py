class FormatError(ValueError):
    pass


class DirectiveTooLongError(FormatError):
    def __init__(self, directive, limit):
        super().__init__(
            "directive '{}' must be less than {} characters"
            .format(directive, limit)
        )
        self.directive = directive


class UnsupportedConversionError(FormatError):
    def __init__(self, char, template):
        if char:
            msg = "unsupported type field at '{}' in format string '{}'"
        else:
            msg = "missing type field at end of format string '{1}'"
        super().__init__(msg.format(char, template))
        self.char = char
        self.template = template


class ModifierNotAllowedError(FormatError):
    def __init__(self, directive, conversion='q'):
        super().__init__("specifier '%{}' cannot have modifiers: '{}'"
                         .format(conversion, directive))
        self.directive = directive


class InsufficientArgumentsError(FormatError, LookupError):
    def __init__(self, directive):
        super().__init__(("not enough arguments for placeholder '{}' in " +
                          'format string').format(directive))
        self.directive = directive


class ArgumentTypeMismatchError(FormatError, TypeError):
    def __init__(self, argno, directive, reason):
        super().__init__("bad argument #{} to '{}' ({})"
                         .format(argno, directive, reason))
        self.argno = argno
        self.directive = directive


class NativeFormattingError(FormatError):
    def __init__(self, directive, reason):
        super().__init__("failed to format '{}': {}".format(directive, reason))
        self.directive = directive

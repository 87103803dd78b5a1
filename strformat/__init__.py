from .app_version import version as __version__  # noqa: F401
from .directive import MAX_DIRECTIVE_SIZE  # noqa: F401
from .driver import format, format_arguments, FormatResult  # noqa: F401
from .exceptions import *  # noqa: F401,F403
from .quote import quote  # noqa: F401
from .stringify import stringify  # noqa: F401
from .utf8 import char_length  # noqa: F401

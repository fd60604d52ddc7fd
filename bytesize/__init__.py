from .errors import ErrorKind, ParseError
from .parse import parse_size, parse_size_clamped
from .prefix import MAX
from .size import FileSize, format_size

__all__ = [
    'MAX',
    'ErrorKind',
    'FileSize',
    'ParseError',
    'format_size',
    'parse_size',
    'parse_size_clamped',
]

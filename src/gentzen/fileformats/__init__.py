"""Reading and writing claims."""

from .base import FileFormat
from .exceptions import SequentSyntaxError, LexicalError, StructuralError
from .sequent import SequentFormat
from .jsonformat import JSONFormat
from .registry import FileFormatRegistry, get_format_handler
from .sequent_parser import read_file, read_string, read_formula

__all__ = [
    'FileFormat', 'SequentFormat', 'JSONFormat',
    'SequentSyntaxError', 'LexicalError', 'StructuralError',
    'FileFormatRegistry', 'get_format_handler',
    'read_file', 'read_string', 'read_formula'
]

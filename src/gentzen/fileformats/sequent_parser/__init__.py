from .parser import read_file, read_string, read_formula

__all__ = ['read_file', 'read_string', 'read_formula']

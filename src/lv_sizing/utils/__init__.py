"""
Central place for general utilities used in lv-sizing.
"""
from . import lookup_table

__all__ = [
    "lookup_table"
]

"""
Sizing routines for low-voltage circuits.
"""
from .conditions import *
from . import circuit

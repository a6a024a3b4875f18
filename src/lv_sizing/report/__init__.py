"""
Circuit schedule and calculation note of dimensioned circuits.
"""
from .schedule import *
from .note import *

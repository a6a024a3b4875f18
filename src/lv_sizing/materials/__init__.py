from .conductors import *
from .insulation import *

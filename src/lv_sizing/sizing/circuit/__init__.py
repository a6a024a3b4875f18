"""
Dimensioning of low-voltage circuits: conductor sections, overload
protection, neutral and earth conductors, and conduit.
"""
from .input import *
from .current import *
from .derating import *
from .conductor import *
from .protection import *
from .voltage_drop import *
from .derived import *
from .conduit import *
from .dimensioning import *

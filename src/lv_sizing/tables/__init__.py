"""
Normative table repository.

Immutable data from the RTIEBT (Regras Técnicas das Instalações Eléctricas de
Baixa Tensão) needed to dimension a low-voltage circuit. All tables are built
once at import time and never modified afterwards, so they can be read from any
number of threads without locking.

Any change to the numeric data changes the outcome of the sizing routine and
must be accompanied by a new `TABLES_VERSION`.
"""
from .installation import *
from .standard_values import *
from .ampacity import *
from .correction import *
from .conduit import *

TABLES_VERSION = "2026.1"

from __future__ import annotations
from enum import StrEnum

class InvocationContext(StrEnum):
    interactive = "interactive"   # request-serving, response body available
    batch = "batch"               # command line / offline

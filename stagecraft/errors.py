"""
StageCraft Errors
==================
Every failure in StageCraft is fatal to the assembly run that raised it.
There is nothing transient to retry: assembly is pure computation over
the given payload, so errors propagate straight to the caller and no
partially built rocket is ever returned.

Hierarchy:
    StageCraftError
    ├── AssemblyError              — a protocol step was called out of order
    │   └── UninitializedProductError — product read before initialize()
    └── InvalidPayloadError        — payload weight rejected (also a ValueError)
"""


class StageCraftError(Exception):
    """Base class for all StageCraft errors."""


class AssemblyError(StageCraftError):
    """A builder step was invoked out of the fixed assembly order."""


class UninitializedProductError(AssemblyError):
    """The product was requested before the builder allocated one."""


class InvalidPayloadError(StageCraftError, ValueError):
    """The payload weight is negative, not a finite number, or too heavy."""

from gridcollage.domain.enums.image_format import ImageFormat, EXTENSION_FORMATS, extensions_for
from gridcollage.domain.enums.invocation import InvocationContext
__all__ = [
    "ImageFormat",
    "EXTENSION_FORMATS",
    "extensions_for",
    "InvocationContext",
]

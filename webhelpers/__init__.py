"""Response envelope and text helpers for FastAPI backends."""

from .core.errors import IllegalStateError
from .response import ResponseWrapper, ResponseWrapperBuilder

__all__ = ["IllegalStateError", "ResponseWrapper", "ResponseWrapperBuilder"]

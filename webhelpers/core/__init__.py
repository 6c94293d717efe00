"""Core utilities and shared application primitives.

Modules in this package should be framework-agnostic where possible and
focused on configuration, validation, errors and logging. The FastAPI
glue lives in ``middleware``.
"""


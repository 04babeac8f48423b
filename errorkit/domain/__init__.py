"""
Domain layer package.

Contains the pure error-handling logic: the canonical error value,
coercion, classification, rendering and port interfaces.
No framework imports, no IO beyond the injected logging sink.
"""

"""
Application layer for error handling.

Sequences coercion, classification and rendering into a single
pipeline run with a Normal or a Fallback outcome.
"""

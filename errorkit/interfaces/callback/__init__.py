"""
Callback-style transport.

Delivers a single result to a continuation instead of writing a response.
"""

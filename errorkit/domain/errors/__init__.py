"""
Error domain.

Canonical error value, coercion of arbitrary failure values,
severity classification and payload rendering.
No framework imports allowed.
"""

"""
Application layer package.

Contains the pipeline that orchestrates the domain steps.
This layer depends on domain ports, never on a concrete transport.
"""

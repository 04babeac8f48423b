"""
Interfaces layer package.

Contains the transport adapters that invoke the pipeline and translate
its outcome into transport-specific output. No policy decisions here.
"""

"""
Synchronous request/response transport.

Hosts the HTTP adapter, content negotiation and the Starlette wiring.
"""

"""
HTTP boundary: routers, middleware and dependency wiring.
"""

"""
DevBase API: projects and tasks scoped to authenticated users.
"""

__version__ = "1.0.0"

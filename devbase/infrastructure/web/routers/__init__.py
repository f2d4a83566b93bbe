"""
API routers.
"""

from . import auth, projects, tasks

__all__ = ["auth", "projects", "tasks"]

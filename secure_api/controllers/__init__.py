"""FastAPI routers acting as controllers in the MVC architecture."""

from . import auth, home

__all__ = ["auth", "home"]

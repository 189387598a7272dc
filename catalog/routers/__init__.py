"""
Routers Package

Router Structure:
- genres.py: /catalog/genres, /catalog/genre/* pages
- bookinstances.py: /catalog/bookinstances, /catalog/bookinstance/* pages

Each router is imported and registered in main.py under the /catalog prefix.
"""

from catalog.routers.bookinstances import router as bookinstances_router
from catalog.routers.genres import router as genres_router

__all__ = [
    "genres_router",
    "bookinstances_router",
]

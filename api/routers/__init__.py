# api/routers/__init__.py

from api.routers.species import router as species_router
from api.routers.enclosures import router as enclosures_router
from api.routers.daynight import router as daynight_router

__all__ = [
    "species_router",
    "enclosures_router",
    "daynight_router"
]

from raritymon.api.health import router as health_router
from raritymon.api.items import router as items_router

__all__ = [
    "health_router",
    "items_router",
]

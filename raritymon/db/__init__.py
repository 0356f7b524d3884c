from raritymon.db.cache import RarityCache, fingerprint
from raritymon.db.database import create_engine, create_session_factory, init_db

__all__ = [
    "RarityCache",
    "create_engine",
    "create_session_factory",
    "fingerprint",
    "init_db",
]

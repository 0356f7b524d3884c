from pathlib import Path

import pytest

from raritymon.db.cache import RarityCache

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def item_html() -> str:
    """Item-details page with three balanced trait blocks."""
    return (FIXTURES / "raritymon_item.html").read_text()


@pytest.fixture
def unbalanced_html() -> str:
    """Item-details page whose last trait block has no tier."""
    return (FIXTURES / "raritymon_item_unbalanced.html").read_text()


@pytest.fixture
async def cache(tmp_path: Path):
    """Cache store backed by a throwaway SQLite file."""
    store = RarityCache.from_url(f"sqlite+aiosqlite:///{tmp_path / 'cache.db'}")
    await store.init()
    yield store
    await store.close()

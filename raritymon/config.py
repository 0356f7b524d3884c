from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment (RARITYMON_*)."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RARITYMON_")

    app_name: str = "RarityMon Lookup"
    debug: bool = False

    db_path: str = "raritymon.db"

    # "host:port"; an empty host listens on all interfaces
    web_host: str = ":1337"

    source_base_url: str = "https://www.raritymon.com"
    fetch_timeout: float = 30.0
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # Unset keeps cache entries forever
    cache_ttl_seconds: int | None = None

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the cache database file."""
        return f"sqlite+aiosqlite:///{self.db_path}"


settings = Settings()

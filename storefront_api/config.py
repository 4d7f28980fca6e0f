from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import os


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"), env_file_encoding="utf-8", extra="ignore")

    app_env: str = Field(default="development", alias="APP_ENV")
    app_debug: bool = Field(default=True, alias="APP_DEBUG")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    store_name: str = Field(default="Tech Haven", alias="STORE_NAME")

    # Hosted data store
    data_store_url: str = Field(default="sqlite:///./storefront.db", alias="DATA_STORE_URL")

    # Public tier: safe for browser-facing reads
    data_store_anon_role: str | None = Field(default="anon", alias="DATA_STORE_ANON_ROLE")
    data_store_anon_key: str | None = Field(default=None, alias="DATA_STORE_ANON_KEY")

    # Privileged tier: admin writes, server side only
    data_store_service_role: str | None = Field(default="service_role", alias="DATA_STORE_SERVICE_ROLE")
    data_store_service_key: str | None = Field(default=None, alias="DATA_STORE_SERVICE_KEY")

    # DB tuning
    db_connect_timeout: int = Field(default=10, alias="DB_CONNECT_TIMEOUT")

    # Storefront display
    featured_limit: int = Field(default=4, alias="FEATURED_LIMIT")
    home_category_limit: int = Field(default=4, alias="HOME_CATEGORY_LIMIT")


settings = Settings()

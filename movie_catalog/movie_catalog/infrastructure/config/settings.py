from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str


class CatalogSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="CATALOG_", extra="ignore"
    )

    # Reject genre + single year bound instead of falling back to the full list
    reject_partial_year_range: bool = False
    create_tables_on_startup: bool = True

"""
Configuration management for the librarygraph server
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LIBRARYGRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True  # GraphiQL IDE on GET requests

    # Catalog data
    # JSON file with "libraries" and "books" arrays; built-in seed data when unset
    catalog_fixture_path: str | None = None

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"


# Global settings instance
settings = Settings()

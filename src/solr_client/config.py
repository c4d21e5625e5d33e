"""Client configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class SolrSettings(BaseSettings):
    """Settings for a Solr core client, read from SOLR_* env vars or .env."""

    model_config = SettingsConfigDict(
        env_prefix="SOLR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    core_url: str = "http://localhost:8983/solr/core"
    verbose: bool = False
    timeout: float = 30.0

import json
from pathlib import Path
from typing import Dict, Any, List

from pydantic_settings import BaseSettings, SettingsConfigDict

from rpc_optimizer.const import (
    CHAINLIST_CACHE_TTL, CHAINLIST_URL, CONFIG_FILE_NAME, DEFAULT_CACHE_TTL, DEFAULT_FASTEST_TIMEOUT_MS,
    DEFAULT_LOG_LEVEL, DEFAULT_SAMPLE_DELAY_MS, DEFAULT_SAMPLES, DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT,
    DEFAULT_TIMEOUT_MS, LIBRARY_LOG_LEVELS
)


class Config(BaseSettings):
    """Global configuration settings for the RPC Optimizer."""

    cache_ttl: float = DEFAULT_CACHE_TTL
    default_samples: int = DEFAULT_SAMPLES
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    fastest_timeout_ms: int = DEFAULT_FASTEST_TIMEOUT_MS
    sample_delay_ms: int = DEFAULT_SAMPLE_DELAY_MS
    parallel: bool = True
    networks: List[str] = []
    use_dynamic_fetch: bool = False
    chainlist_url: str = CHAINLIST_URL
    chainlist_cache_ttl: float = CHAINLIST_CACHE_TTL
    server_host: str = DEFAULT_SERVER_HOST
    server_port: int = DEFAULT_SERVER_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix='RPC_OPTIMIZER_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )

"""Shared configuration utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml
from dotenv import load_dotenv

T = TypeVar("T")

CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"
CONFIG_ENV_VAR = "SNIPPET_UPLOADER_CONFIG"


@dataclass
class WordPressConfig:
    api_root: str = "https://poly.rpi.edu/wp-json"
    username: str = "uploader"
    password: str = ""
    timeout: float = 10.0
    recent_posts: int = 30


@dataclass
class StoreConfig:
    bucket: str = ""
    snippets_prefix: str = "snippets"
    photos_prefix: str = "photos"
    photo_root_marker: str = "/Team Drives/The Polytechnic/"


@dataclass
class CatalogConfig:
    lookback_days: int = 5
    refresh_seconds: int = 600


@dataclass
class ValidationConfig:
    min_body_chars: int = 100


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class UploaderConfig:
    wordpress: WordPressConfig = field(default_factory=WordPressConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml) or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_config(data: dict) -> UploaderConfig:
    """Parse config dictionary into UploaderConfig, filling secrets from the environment."""
    wp_raw = data.get("wordpress", {})
    store_raw = data.get("store", {})
    catalog_raw = data.get("catalog", {})
    validation_raw = data.get("validation", {})
    server_raw = data.get("server", {})

    wordpress = WordPressConfig(
        api_root=wp_raw.get("api_root", WordPressConfig.api_root).rstrip("/"),
        username=wp_raw.get("username", WordPressConfig.username),
        password=os.getenv("WP_API_PASSWORD", ""),
        timeout=float(wp_raw.get("timeout", WordPressConfig.timeout)),
        recent_posts=int(wp_raw.get("recent_posts", WordPressConfig.recent_posts)),
    )

    store = StoreConfig(
        bucket=os.getenv("S3_BUCKET_NAME", store_raw.get("bucket", "")),
        snippets_prefix=store_raw.get("snippets_prefix", StoreConfig.snippets_prefix),
        photos_prefix=store_raw.get("photos_prefix", StoreConfig.photos_prefix),
        photo_root_marker=store_raw.get("photo_root_marker", StoreConfig.photo_root_marker),
    )

    catalog = CatalogConfig(
        lookback_days=int(catalog_raw.get("lookback_days", CatalogConfig.lookback_days)),
        refresh_seconds=int(catalog_raw.get("refresh_seconds", CatalogConfig.refresh_seconds)),
    )

    validation = ValidationConfig(
        min_body_chars=int(validation_raw.get("min_body_chars", ValidationConfig.min_body_chars)),
    )

    server = ServerConfig(
        host=server_raw.get("host", ServerConfig.host),
        port=int(server_raw.get("port", ServerConfig.port)),
    )

    return UploaderConfig(
        wordpress=wordpress,
        store=store,
        catalog=catalog,
        validation=validation,
        server=server,
    )


def load_config(config_name: str | None = None, config_dir: Path = CONFIG_DIR) -> UploaderConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses SNIPPET_UPLOADER_CONFIG env var or "prod".
        config_dir: Directory containing config files

    Returns:
        Loaded UploaderConfig object
    """
    load_dotenv()
    path = find_config_path(config_name, config_dir, env_var=CONFIG_ENV_VAR)
    return parse_config(load_yaml(path))


class ConfigSingleton(Generic[T]):
    """Generic config singleton manager.

    Provides get/set/reset pattern for managing a global config instance.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Get the config, loading it lazily if needed."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Set the config directly."""
        self._config = config

    def reset(self) -> None:
        """Reset the config, forcing reload on next get()."""
        self._config = None


_manager: ConfigSingleton[UploaderConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set

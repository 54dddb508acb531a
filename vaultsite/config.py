"""Configuration management using pydantic-settings."""

import json
import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Name of the publish config file at the vault root
CONFIG_FILE_NAME = "publish.config.json"

# Placeholder in the default exclude list, swapped for the vault's config dir
OBSIDIAN_DIR = ".obsidian"

SlugStyle = Literal["kebab", "original"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Vault
    vault_path: Path
    obsidian_dir: str = OBSIDIAN_DIR

    # Publish config file, relative to the vault root
    config_file: str = CONFIG_FILE_NAME

    @field_validator("vault_path")
    @classmethod
    def validate_vault_path(cls, v: Path) -> Path:
        """Ensure vault path exists and is a directory."""
        if not v.exists():
            raise ValueError(f"Vault path does not exist: {v}")
        if not v.is_dir():
            raise ValueError(f"Vault path is not a directory: {v}")
        return v.resolve()


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()


class PublishConfig(BaseModel):
    """What to publish and where the site generator expects it.

    Keys are camelCase on disk (``baseRoute``, ``slugStyle``) but snake_case
    names are accepted as well.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    # Empty = publish the whole vault
    include: list[str] = []
    exclude: list[str] = [OBSIDIAN_DIR, "site", "private", "journal"]
    site_dir: str = "site"
    content_dir: str = "site/content"
    assets_dir: str = "site/public/assets"
    base_route: str = "/notes"
    slug_style: SlugStyle = "kebab"

    @field_validator("include", "exclude")
    @classmethod
    def strip_patterns(cls, v: list[str]) -> list[str]:
        return [p.strip() for p in v]

    @field_validator("base_route")
    @classmethod
    def normalize_base_route(cls, v: str) -> str:
        """Leading slash, no trailing slash. The site root becomes ``""``."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class ConfigManager:
    """Loads and saves the publish config stored at the vault root."""

    def __init__(
        self,
        vault_path: Path,
        config_file: str = CONFIG_FILE_NAME,
        obsidian_dir: str = OBSIDIAN_DIR,
    ) -> None:
        self.vault_path = vault_path
        self.config_path = vault_path / config_file
        self.obsidian_dir = obsidian_dir

    def defaults(self) -> PublishConfig:
        """Default config with the vault's own config dir excluded."""
        config = PublishConfig()
        exclude = [self.obsidian_dir if p == OBSIDIAN_DIR else p for p in config.exclude]
        return config.model_copy(update={"exclude": exclude})

    def load(self) -> PublishConfig:
        """Load config from disk, falling back to defaults.

        Values in the file are merged over the defaults so partial files work.
        A file that cannot be read or parsed is logged and ignored.
        """
        if not self.config_path.exists():
            return self.defaults()

        try:
            data = self._parse(self.config_path.read_text(encoding="utf-8")) or {}
            if not isinstance(data, dict):
                raise ValueError("top level must be a mapping")
            loaded = PublishConfig.model_validate(data)
            explicit = {name: getattr(loaded, name) for name in loaded.model_fields_set}
            return self.defaults().model_copy(update=explicit)
        except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Failed to load publish config {self.config_path}, using defaults: {e}")
            return self.defaults()

    def save(self, config: PublishConfig) -> None:
        """Write config to disk in the format its file extension implies."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        if self._is_yaml():
            content = yaml.dump(config.to_dict(), default_flow_style=False, allow_unicode=True)
        else:
            content = json.dumps(config.to_dict(), indent=2, ensure_ascii=False) + "\n"
        self.config_path.write_text(content, encoding="utf-8")
        logger.info(f"Saved publish config to {self.config_path}")

    def ensure_exists(self) -> bool:
        """Write the default config if none exists. Returns True if written."""
        if self.config_path.exists():
            return False
        self.save(self.defaults())
        return True

    def _is_yaml(self) -> bool:
        return self.config_path.suffix.lower() in (".yaml", ".yml")

    def _parse(self, text: str):
        if self._is_yaml():
            return yaml.safe_load(text)
        return json.loads(text)

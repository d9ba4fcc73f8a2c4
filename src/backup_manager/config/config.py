"""Configuration management for backup-manager."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from backup_manager.config.file_ops import ensure_file_with_template
from backup_manager.config.paths import default_config_path
from backup_manager.features.storage.domain.errors import ConfigurationError
from backup_manager.features.storage.usecases.repository import StorageConfigRepository
from backup_manager.platform.logging import logger


DEFAULT_CONFIG_TEMPLATE = """\
# backup-manager configuration file

# Log file path (optional)
# Example: log_file = "/var/log/backup-manager.log"

# Storage destinations. Each [storage.<name>] table declares one source
# that commands can operate on; "type" selects the backend.
#
# [storage.local]
# type = "local"
# root = "/var/backups"
#
# [storage.s3]
# type = "s3"
# bucket = "my-backups"
# region = "eu-west-1"
# root = "database"
# key = "..."      # optional, defaults to the boto3 credential chain
# secret = "..."   # optional
"""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Storage destinations keyed by source name, in file order
    storage: dict[str, dict[str, Any]] = field(default_factory=dict)

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def storage_repository(self) -> StorageConfigRepository:
        """Expose the storage tables through the lookup repository."""

        return StorageConfigRepository(self.storage, config_path=type(self)._loaded_from)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigurationError: When the file is not valid TOML or a storage
                entry is not a table.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            try:
                created = ensure_file_with_template(
                    config_file, template_provider=lambda: DEFAULT_CONFIG_TEMPLATE
                )
            except OSError as e:
                # Read-only location: run with an empty configuration.
                logger.warning(
                    "Could not create default configuration at %s: %s",
                    config_file,
                    e,
                    extra={"markup": False},
                )
                created = False
            if created:
                logger.info(
                    "Created default configuration at %s", config_file, extra={"markup": False}
                )
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration: %s", e, extra={"markup": False})
                raise ConfigurationError(f"Invalid configuration file {config_file}: {e}") from e

            instance = cls(
                log_file=config_dict.get("log_file"),
                storage=cls._parse_storage(config_dict.get("storage", {}), config_file),
            )
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @staticmethod
    def _parse_storage(raw: Any, config_file: Path) -> dict[str, dict[str, Any]]:
        if not isinstance(raw, dict):
            raise ConfigurationError(f"'storage' in {config_file} must be a table")

        storage: dict[str, dict[str, Any]] = {}
        for name, settings in raw.items():
            if not isinstance(settings, dict):
                raise ConfigurationError(
                    f"Storage entry '{name}' in {config_file} must be a table"
                )
            storage[name] = dict(settings)
        return storage

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "DEFAULT_CONFIG_TEMPLATE"]

"""Configuration management for cuemeta."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from cuemeta.config.file_ops import write_text_file
from cuemeta.config.paths import default_config_path
from cuemeta.platform.logging import logger


ITEM_SEPARATOR_DEFAULT: str = " / "


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Separator used to split performer and genre strings into lists
    item_separator: str = ITEM_SEPARATOR_DEFAULT

    # Scan the sheet's directory when a referenced file is not found verbatim
    resolve_case_insensitive: bool = True

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Only fields created through ``_path_field`` are converted.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# cuemeta Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/cuemeta.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Separator for multi-value performer and genre fields")
        lines.append("# An empty string disables splitting")
        lines.append(f"item_separator = {self._format_toml_value(config['item_separator'])}")
        lines.append("")

        lines.append("# Fall back to a case-insensitive directory scan when a FILE")
        lines.append("# referenced by a cue sheet does not exist verbatim (default true)")
        lines.append(
            "resolve_case_insensitive = "
            f"{self._format_toml_value(config['resolve_case_insensitive'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("item_separator", ITEM_SEPARATOR_DEFAULT)
                _ = config_dict.setdefault("resolve_case_insensitive", True)

                known = {f.name for f in fields(cls)}
                for key in list(config_dict):
                    if key not in known:
                        logger.warning("Ignoring unknown configuration key: %s", key)
                        del config_dict[key]

                log_file = config_dict.get("log_file")
                if isinstance(log_file, str) and not log_file.strip():
                    config_dict["log_file"] = None

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()

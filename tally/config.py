"""Configuration file management for tally."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from tally.domain.category import Category
from tally.domain.charset import Charset
from tally.domain.errors import ConfigError, LedgerError
from tally.domain.limits import Limitkind
from tally.domain.money import Cents
from tally.domain.records import TemplateEntry

CONFIG_FILENAME = ".tally.toml"


@dataclass(frozen=True)
class Config:
    """Repository configuration."""

    first_index_in_date: int = 1
    lim_account_type: Limitkind | None = None
    unsigned_is_negative: bool = False
    use_colored_output: bool = True
    use_unicode_symbols: bool = True
    templates: dict[str, list[TemplateEntry]] = field(default_factory=dict)

    def charset(self) -> Charset:
        """Build the charset the renderers should draw with."""
        charset = Charset()
        if self.use_unicode_symbols:
            charset = charset.with_unicode()
        if self.use_colored_output:
            charset = charset.with_color()
        return charset

    def default_limitkind(self) -> Limitkind:
        """Return the configured account type.

        Raises:
            ConfigError: If none is configured.
        """
        if self.lim_account_type is None:
            raise ConfigError("no default account type configured")
        return self.lim_account_type


def _expect(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key, default)
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"invalid config: '{key}' must be of type {kind.__name__}")
    return value


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build a Config from parsed TOML.

    Args:
        data: Configuration dictionary.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If a key is unknown or a value is invalid.
    """
    defaults = Config()
    unknown = set(data) - {
        "first_index_in_date",
        "lim_account_type",
        "unsigned_is_negative",
        "use_colored_output",
        "use_unicode_symbols",
        "templates",
    }
    if unknown:
        raise ConfigError(f"invalid config: unknown key '{sorted(unknown)[0]}'")

    first_index_in_date = _expect(data, "first_index_in_date", int, defaults.first_index_in_date)
    if first_index_in_date < 0:
        raise ConfigError("invalid config: 'first_index_in_date' must not be negative")

    lim_account_type = None
    if "lim_account_type" in data:
        lim_account_type = Limitkind.parse(_expect(data, "lim_account_type", str, ""))

    templates: dict[str, list[TemplateEntry]] = {}
    for name, entries in _expect(data, "templates", dict, {}).items():
        if not isinstance(entries, list):
            raise ConfigError(f"invalid config: template '{name}' must be a list")
        templates[name] = [_template_entry(name, entry) for entry in entries]

    return Config(
        first_index_in_date=first_index_in_date,
        lim_account_type=lim_account_type,
        unsigned_is_negative=_expect(data, "unsigned_is_negative", bool, defaults.unsigned_is_negative),
        use_colored_output=_expect(data, "use_colored_output", bool, defaults.use_colored_output),
        use_unicode_symbols=_expect(data, "use_unicode_symbols", bool, defaults.use_unicode_symbols),
        templates=templates,
    )


def _template_entry(name: str, entry: Any) -> TemplateEntry:
    if not isinstance(entry, dict) or set(entry) != {"category", "amount"}:
        raise ConfigError(f"invalid config: entries of template '{name}' need exactly 'category' and 'amount'")
    try:
        return TemplateEntry(Category(str(entry["category"])), Cents.parse(str(entry["amount"])))
    except LedgerError as e:
        raise ConfigError(f"invalid config: template '{name}': {e}") from e


def config_to_dict(config: Config) -> dict[str, Any]:
    """Convert a Config to a TOML-serializable dictionary."""
    data: dict[str, Any] = {
        "first_index_in_date": config.first_index_in_date,
        "unsigned_is_negative": config.unsigned_is_negative,
        "use_colored_output": config.use_colored_output,
        "use_unicode_symbols": config.use_unicode_symbols,
    }
    if config.lim_account_type is not None:
        data["lim_account_type"] = config.lim_account_type.value
    if config.templates:
        data["templates"] = {
            name: [{"category": str(e.category), "amount": str(e.amount)} for e in entries]
            for name, entries in config.templates.items()
        }
    return data


def load_config(config_path: Path) -> Config:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file.

    Returns:
        Configuration, or the defaults if the file doesn't exist.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return Config()
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid config: {e}") from e
    return config_from_dict(data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration to write.
        config_path: Path to config file.
    """
    with open(config_path, "wb") as f:
        tomli_w.dump(config_to_dict(config), f)

    os.chmod(config_path, 0o600)

"""Tests for tally.config."""

import tomllib
from pathlib import Path

import pytest

from tally.config import Config, config_from_dict, config_to_dict, load_config, save_config
from tally.domain.category import Category
from tally.domain.charset import Charset
from tally.domain.errors import ConfigError
from tally.domain.limits import Limitkind
from tally.domain.money import Cents
from tally.domain.records import TemplateEntry


class TestConfigFromDict:
    """Tests for config_from_dict."""

    def test_defaults(self) -> None:
        """Should fill in every missing key with its default."""
        config = config_from_dict({})

        assert config == Config()
        assert config.first_index_in_date == 1
        assert config.lim_account_type is None
        assert config.unsigned_is_negative is False
        assert config.use_colored_output is True
        assert config.use_unicode_symbols is True

    def test_all_keys(self) -> None:
        """Should read every supported key."""
        config = config_from_dict(
            {
                "first_index_in_date": 0,
                "lim_account_type": "tfsa",
                "unsigned_is_negative": True,
                "use_colored_output": False,
                "use_unicode_symbols": False,
                "templates": {"rent": [{"category": "housing/rent", "amount": "-1,200.00"}]},
            }
        )

        assert config.first_index_in_date == 0
        assert config.lim_account_type is Limitkind.TFSA
        assert config.unsigned_is_negative is True
        assert config.templates == {"rent": [TemplateEntry(Category("housing/rent"), Cents(-120000))]}

    def test_rejects_unknown_key(self) -> None:
        """Should reject keys it does not know."""
        with pytest.raises(ConfigError, match="unknown key 'colour'"):
            config_from_dict({"colour": True})

    def test_rejects_wrong_types(self) -> None:
        """Should reject values of the wrong type."""
        for data in (
            {"first_index_in_date": "1"},
            {"first_index_in_date": True},
            {"first_index_in_date": -1},
            {"use_colored_output": "yes"},
            {"lim_account_type": "401k"},
            {"templates": []},
            {"templates": {"t": {}}},
        ):
            with pytest.raises(ConfigError):
                config_from_dict(data)

    def test_rejects_bad_template_entries(self) -> None:
        """Should require a valid category and amount in each entry."""
        for entry in ({"category": "a"}, {"category": "", "amount": "1"}, {"category": "a", "amount": "x"}):
            with pytest.raises(ConfigError):
                config_from_dict({"templates": {"t": [entry]}})


class TestConfigCharset:
    """Tests for Config.charset and Config.default_limitkind."""

    def test_plain(self) -> None:
        """Should use ASCII without colour when both are disabled."""
        config = Config(use_colored_output=False, use_unicode_symbols=False)

        assert config.charset() == Charset()

    def test_fancy(self) -> None:
        """Should combine unicode glyphs and colour codes."""
        assert Config().charset() == Charset().with_unicode().with_color()

    def test_default_limitkind_missing(self) -> None:
        """Should raise when no account type is configured."""
        with pytest.raises(ConfigError, match="no default account type configured"):
            Config().default_limitkind()

    def test_default_limitkind(self) -> None:
        """Should return the configured account type."""
        assert Config(lim_account_type=Limitkind.RRSP).default_limitkind() is Limitkind.RRSP


class TestConfigFile:
    """Tests for load_config and save_config."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should fall back to defaults when there is no file."""
        assert load_config(tmp_path / "missing.toml") == Config()

    def test_round_trip(self, tmp_path: Path) -> None:
        """Should read back what it writes."""
        path = tmp_path / ".tally.toml"
        config = Config(
            first_index_in_date=0,
            lim_account_type=Limitkind.RRSP,
            templates={"pay": [TemplateEntry(Category("salary"), Cents(250000))]},
        )

        save_config(config, path)

        assert load_config(path) == config
        assert path.stat().st_mode & 0o777 == 0o600

    def test_writes_every_key(self, tmp_path: Path) -> None:
        """Should write all settings so users can edit them."""
        path = tmp_path / ".tally.toml"
        save_config(Config(), path)

        with open(path, "rb") as f:
            data = tomllib.load(f)

        assert data == config_to_dict(Config())
        assert set(data) == {"first_index_in_date", "unsigned_is_negative", "use_colored_output", "use_unicode_symbols"}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should raise ConfigError for unparseable files."""
        path = tmp_path / ".tally.toml"
        path.write_text("first_index_in_date = [")

        with pytest.raises(ConfigError):
            load_config(path)

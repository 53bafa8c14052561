# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from pathlib import Path
from unittest.mock import mock_open, patch

import pytest
from pydantic import BaseModel, Field

from svnharvest.core.config.config_loader import ConfigLoader
from svnharvest.core.exceptions import ConfigurationError

# -----------------------------------------------------------------------------
# Test Models
# -----------------------------------------------------------------------------


class SampleConfig(BaseModel):
    svn_executable: str = "svn"
    max_attempts: int = Field(default=1, ge=1)
    verbose: bool = False


# -----------------------------------------------------------------------------
# ConfigLoader Tests
# -----------------------------------------------------------------------------


def test_load_toml_exists():
    """Test loading a valid TOML file."""
    toml_content = b'svn_executable = "/usr/bin/svn"\nmax_attempts = 3'
    with patch("builtins.open", mock_open(read_data=toml_content)):
        with patch("pathlib.Path.exists", return_value=True):
            data = ConfigLoader.load_toml(Path("svnharvestconfig.toml"))
            assert data == {"svn_executable": "/usr/bin/svn", "max_attempts": 3}


def test_load_toml_not_exists(tmp_path):
    """Test loading a non-existent file returns empty dict."""
    assert ConfigLoader.load_toml(tmp_path / "missing.toml") == {}


def test_load_toml_invalid(tmp_path):
    """Test loading an invalid TOML file returns empty dict."""
    bad = tmp_path / "bad.toml"
    bad.write_text("max_attempts = = 3")

    assert ConfigLoader.load_toml(bad) == {}


def test_load_env():
    """Test loading environment variables with prefix; keys are lowercased."""
    with patch.dict(
        "os.environ",
        {"APP_MAX_ATTEMPTS": "5", "APP_Svn_Executable": "svn2", "OTHER": "ignore"},
        clear=True,
    ):
        data = ConfigLoader.load_env("APP_")
        assert data == {"max_attempts": "5", "svn_executable": "svn2"}


def test_precedence_order():
    """Test the precedence order: Args > Custom > Local > Env > Global."""

    args = {"svn_executable": "args"}
    custom = {"svn_executable": "custom"}
    local = {"svn_executable": "local"}
    env = {"svn_executable": "env"}
    global_ = {"svn_executable": "global"}

    def run_config(args_in, tomls, env_in, custom_path=None):
        with (
            patch.object(ConfigLoader, "load_toml") as mock_load_toml,
            patch.object(ConfigLoader, "load_env", return_value=env_in),
            patch("pathlib.Path.exists", return_value=True),
        ):
            mock_load_toml.side_effect = lambda p: tomls.get(str(p), {})

            return ConfigLoader.get_full_config(
                SampleConfig,
                args_in,
                Path("local.toml"),
                "APP_",
                Path("global.toml"),
                Path("custom.toml") if custom_path else None,
            )

    all_tomls = {"custom.toml": custom, "local.toml": local, "global.toml": global_}

    config, _, _ = run_config(args, all_tomls, env, custom_path=True)
    assert config.svn_executable == "args"

    config, sources, _ = run_config({}, all_tomls, env, custom_path=True)
    assert config.svn_executable == "custom"
    assert sources == ["Custom Config"]

    config, _, _ = run_config({}, all_tomls, env)
    assert config.svn_executable == "local"

    config, _, _ = run_config({}, {"global.toml": global_}, env)
    assert config.svn_executable == "env"

    config, sources, _ = run_config({}, {"global.toml": global_}, {})
    assert config.svn_executable == "global"
    assert sources == ["Global Config"]


def test_sources_and_defaults_are_reported():
    with (
        patch.object(ConfigLoader, "load_toml", return_value={}),
        patch.object(ConfigLoader, "load_env", return_value={"verbose": "true"}),
    ):
        config, sources, used_defaults = ConfigLoader.get_full_config(
            SampleConfig, {"max_attempts": 2}, Path("local.toml"), "APP_", Path("global.toml")
        )

    assert config.max_attempts == 2
    assert config.verbose is True
    assert sources == ["Input Args", "Environment Variables"]
    assert used_defaults


def test_missing_custom_config(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigLoader.get_full_config(
            SampleConfig,
            {},
            tmp_path / "local.toml",
            "APP_",
            tmp_path / "global.toml",
            tmp_path / "custom.toml",
        )


@pytest.mark.parametrize("args", [{"max_attempts": "not-a-number"}, {"max_attempts": 0}])
def test_validation_error(args):
    """Test that invalid values raise ConfigurationError."""
    with (
        patch.object(ConfigLoader, "load_toml", return_value={}),
        patch.object(ConfigLoader, "load_env", return_value={}),
    ):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.get_full_config(
                SampleConfig, args, Path("local.toml"), "APP_", Path("global.toml")
            )

    assert exc_info.value.message == "Invalid configuration"
    assert "max_attempts" in exc_info.value.details


def test_build_takes_each_key_from_first_layer():
    layers = [
        ("Input Args", {"max_attempts": 4}),
        ("Local Config", {"max_attempts": 2, "verbose": True, "unknown": "x"}),
        ("Global Config", {"verbose": False, "svn_executable": "svn2"}),
    ]

    config, used, used_defaults = ConfigLoader.build(SampleConfig, layers)

    assert config.max_attempts == 4
    assert config.verbose is True
    assert config.svn_executable == "svn2"
    assert used == ["Input Args", "Local Config", "Global Config"]
    assert not used_defaults


def test_build_ignores_layers_with_unknown_keys_only():
    config, used, used_defaults = ConfigLoader.build(
        SampleConfig, [("Environment Variables", {"path": "/usr/bin"})]
    )

    assert config == SampleConfig()
    assert used == []
    assert used_defaults

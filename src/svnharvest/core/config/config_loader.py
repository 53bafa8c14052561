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

import os
from pathlib import Path

import tomllib
from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from svnharvest.constants import ENV_APP_PREFIX, GLOBAL_CONFIG_FILE, LOCAL_CONFIG_FILE
from svnharvest.core.exceptions import ConfigurationError

# (source name, values) pairs, highest priority first
ConfigLayers = list[tuple[str, dict]]


class ConfigLoader:
    """
    Layers configuration sources on top of each other and validates the
    result against a pydantic model.

    Priority, highest first: input args, custom config file, local config
    file, environment variables, global config file. A key is taken from the
    first layer that provides it; keys no layer provides keep the model's
    default.
    """

    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        local_config_path: Path = LOCAL_CONFIG_FILE,
        env_app_prefix: str = ENV_APP_PREFIX,
        global_config_path: Path = GLOBAL_CONFIG_FILE,
        custom_config_path: Path | None = None,
    ):
        """Returns the model, the names of the layers that contributed, and whether defaults were used."""
        layers: ConfigLayers = [("Input Args", input_args)]

        if custom_config_path is not None:
            if not custom_config_path.exists():
                raise ConfigurationError(
                    f"Custom config file not found: {custom_config_path}"
                )
            layers.append(("Custom Config", ConfigLoader.load_toml(custom_config_path)))

        layers.append(("Local Config", ConfigLoader.load_toml(local_config_path)))
        layers.append(("Environment Variables", ConfigLoader.load_env(env_app_prefix)))
        layers.append(("Global Config", ConfigLoader.load_toml(global_config_path)))

        for name, values in layers:
            logger.debug(f"Config layer {name}: {values}")

        return ConfigLoader.build(config_model, layers)

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Reads a TOML config file; a missing or unparsable file contributes nothing."""
        if not path.exists():
            logger.debug(f"No config file at {path}")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Ignoring invalid config file {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """SVNHARVEST_MAX_ATTEMPTS=3 -> {"max_attempts": "3"}; the prefix is matched case-insensitively."""
        prefix = app_prefix.lower()
        return {
            key[len(app_prefix) :].lower(): value
            for key, value in os.environ.items()
            if key.lower().startswith(prefix)
        }

    @staticmethod
    def build(config_model: type[BaseModel], layers: ConfigLayers):
        fields = config_model.model_fields
        merged: dict = {}
        used_layers: list[str] = []

        for name, values in layers:
            contributed = {
                key: value
                for key, value in values.items()
                if key in fields and key not in merged
            }
            if contributed:
                used_layers.append(name)
                merged.update(contributed)

        try:
            model = config_model.model_validate(merged)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration", str(e))

        return model, used_layers, len(merged) < len(fields)

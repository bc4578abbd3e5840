#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Central configuration access.
#
"""
Central configuration access helpers.

Values from cfg/config.yaml can be overridden by environment variables
(or a .env file), which keeps secrets out of the YAML file.
"""

import os
from typing import Any

from dotenv import load_dotenv

from utils import load_config


DEFAULT_CONFIG_PATH = "cfg/config.yaml"

# (section, key) -> environment variable
ENV_OVERRIDES = {
    ("database", "user"): "XBEEWEB_DB_USER",
    ("database", "password"): "XBEEWEB_DB_PASSWORD",
    ("database", "host"): "XBEEWEB_DB_HOST",
    ("auth", "cookie_key"): "XBEEWEB_COOKIE_KEY",
}


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    for (section, key), env_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config.setdefault(section, {})
            if config[section] is None:
                config[section] = {}
            config[section][key] = value
    return config


def get_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    load_dotenv()
    return apply_env_overrides(load_config(config_path=config_path))


def get_config_section(
    section: str | None = None,
    config_path: str = DEFAULT_CONFIG_PATH,
) -> dict[str, Any]:
    config = get_config(config_path=config_path)
    if section:
        return config.get(section) or {}
    return config

# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import logging
from logging.config import dictConfig
from typing import Dict

from timesettings import defines
from timesettings.errors.errors import FailedToSetLogLevel

DEFAULT_CONFIG = {
    "version": 1,
    "formatters": {"timesettings": {"format": "%(levelname)s - %(name)s - %(message)s"}},
    "handlers": {
        "journald": {
            "class": "systemd.journal.JournalHandler",
            "formatter": "timesettings",
            "SYSLOG_IDENTIFIER": "TIMESETTINGS",
        }
    },
    "root": {"level": "INFO", "handlers": ["journald"]},
}


def _get_config() -> Dict:
    with defines.loggingConfig.open("r") as f:
        return json.load(f)


def configure_log() -> bool:
    """
    Configure logger according to configuration file or hardcoded config

    :return: True if configuration file was used, False otherwise
    """
    try:
        dictConfig(_get_config())
        return True
    except Exception:
        dictConfig(DEFAULT_CONFIG)
        return False


def get_log_level() -> int:
    """
    Get current loglevel from configuration file

    :return: Current loglevel
    """
    try:
        config = _get_config()
    except Exception:
        config = DEFAULT_CONFIG
    raw_level = config["root"]["level"]
    return logging.getLevelName(raw_level)


def _set_config(config: Dict, level: int, persistent: bool):
    try:
        config["root"]["level"] = logging.getLevelName(level)
        # Setting level to root logger changes all loggers (in the same process)
        logging.getLogger().setLevel(level)

        if persistent:
            with defines.loggingConfig.open("w") as f:
                json.dump(config, f)
    except Exception as exception:
        raise FailedToSetLogLevel from exception


def set_log_level(level: int, persistent=True) -> bool:
    """
    Set log level to configuration file and runtime

    :param level: Log level to set
    :param persistent: True to set persistent configuration, False to set transient/runtime configuration
    :return: True if config file was used as a base, False otherwise
    """
    try:
        config = _get_config()
        base_used = True
    except Exception:
        config = json.loads(json.dumps(DEFAULT_CONFIG))
        base_used = False

    _set_config(config, level, persistent)
    return base_used

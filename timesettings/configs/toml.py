# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from pathlib import Path
from typing import Optional, Dict, Any

import toml

from timesettings import test_runtime
from timesettings.errors.errors import ConfigException


class TomlConfig:
    def __init__(self, filename: Optional[Path] = None):
        self.logger = logging.getLogger(__name__)
        self.filename = filename
        self.data: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        try:
            if not self.filename:
                raise ConfigException("No filename specified")
            with open(self.filename, "r") as f:
                self.data = toml.load(f)
        except FileNotFoundError:
            self.logger.warning("File '%s' not found", self.filename)
            self.data = {}
        except Exception as exception:
            if test_runtime.testing:
                raise exception
            self.logger.exception("Failed to load toml file")
            self.data = {}
        return self.data

    def save_raw(self) -> None:
        if not self.filename:
            raise ConfigException("No filename specified")
        Path(self.filename).parent.mkdir(parents=True, exist_ok=True)
        with open(self.filename, "w") as f:
            toml.dump(self.data, f)

    def save(self, data: Optional[Dict[str, Any]] = None, filename: Optional[Path] = None) -> bool:
        try:
            if data:
                self.data = data
            if filename:
                self.filename = filename
            self.save_raw()
        except Exception as exception:
            if test_runtime.testing:
                raise exception
            self.logger.exception("Failed to save toml file")
            return False
        return True

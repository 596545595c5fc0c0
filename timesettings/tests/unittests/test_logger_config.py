# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import logging
import unittest
from shutil import copyfile

from timesettings import defines
from timesettings.logger_config import get_log_level, set_log_level, DEFAULT_CONFIG
from timesettings.tests.base import TimeSettingsTestCase


class TestLoggerConfig(TimeSettingsTestCase):
    def test_default_level(self):
        self.assertFalse(defines.loggingConfig.exists())
        self.assertEqual(logging.INFO, get_log_level())

    def test_set_level_without_config(self):
        self.assertFalse(set_log_level(logging.DEBUG))
        self.assertEqual(logging.DEBUG, get_log_level())
        self.assertEqual("INFO", DEFAULT_CONFIG["root"]["level"])

    def test_set_level_transient(self):
        copyfile(self.TIMESETTINGS_DIR / "loggerConfig.json", defines.loggingConfig)
        self.assertTrue(set_log_level(logging.WARNING, persistent=False))
        self.assertEqual(logging.WARNING, logging.getLogger().level)
        self.assertEqual(logging.INFO, get_log_level())

    def test_set_level_persistent(self):
        copyfile(self.TIMESETTINGS_DIR / "loggerConfig.json", defines.loggingConfig)
        self.assertTrue(set_log_level(logging.ERROR))
        self.assertEqual(logging.ERROR, get_log_level())
        with defines.loggingConfig.open() as f:
            self.assertEqual("ERROR", json.load(f)["root"]["level"])


if __name__ == "__main__":
    unittest.main()

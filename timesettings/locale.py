# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import gettext
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from gi.repository import GLib

from timesettings import defines


class LocaleProvider(ABC):
    @abstractmethod
    def current_locale(self) -> str:
        ...


class StaticLocaleProvider(LocaleProvider):
    def __init__(self, locale: str = defines.defaultLocale):
        self._locale = locale

    def current_locale(self) -> str:
        return self._locale


class Locale1Provider(LocaleProvider):
    """
    Session locale as set in systemd-localed
    """

    def __init__(self, bus, fallback: str = defines.defaultLocale):
        self._logger = logging.getLogger(__name__)
        self._bus = bus
        self._fallback = fallback

    def current_locale(self) -> str:
        try:
            settings = self._bus.get(defines.localeService).Locale
        except GLib.GError:
            self._logger.exception("Failed to read locale, using %s", self._fallback)
            return self._fallback

        # Either ["LANG=cs_CZ.UTF-8", ...] or a plain locale name
        if isinstance(settings, str):
            settings = [settings]
        for item in settings:
            key, _, value = item.partition("=")
            if not value:
                value = key
            elif key != "LANG":
                continue
            locale = value.split(".")[0].strip()
            if locale:
                return locale

        self._logger.warning("No locale found for the current session, using %s", self._fallback)
        return self._fallback


def label_translator(provider: Optional[LocaleProvider], localedir: Optional[str] = None) -> Callable[[str], str]:
    """
    Get function translating time zone labels to the current session language

    Missing translation catalogs leave labels untouched.

    :param provider: Locale provider, None means no translation
    :param localedir: Directory containing gettext catalogs
    :return: Translation function
    """
    if provider is None:
        return lambda label: label
    locale = provider.current_locale()
    translation = gettext.translation(
        defines.gettextDomain,
        localedir if localedir else defines.localedir,
        languages=[locale],
        fallback=True,
    )
    return translation.gettext

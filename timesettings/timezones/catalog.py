# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from dataclasses import dataclass
from enum import unique, Enum
from typing import Tuple, Optional, Callable, Iterator, NamedTuple, Iterable

from timesettings.errors.errors import TimeZoneNotFound
from timesettings.timezones.table import TIME_ZONE_TABLE


@unique
class MatchPolicy(Enum):
    """
    How an identifier is matched against group members

    EXACT requires the identifier to equal a member. SUBSTRING accepts any member containing the identifier, this is
    the legacy behaviour kept for data written by older systems. It is ambiguous for short inputs ("Europe" matches
    the first European group), so it has to be enabled explicitly.
    """

    EXACT = "exact"
    SUBSTRING = "substring"


@dataclass(frozen=True)
class TimeZoneGroup:
    """
    Set of time zone identifiers presented to the user as a single choice

    The first member is the canonical value, it is the value stored when the group is selected.
    """

    members: Tuple[str, ...]
    label: str

    def __post_init__(self):
        if not self.members:
            raise ValueError(f"Time zone group {self.label!r} has no members")

    @property
    def canonical(self) -> str:
        return self.members[0]

    def matches(self, identifier: str, policy: MatchPolicy = MatchPolicy.EXACT) -> bool:
        if not identifier:
            return False
        if policy == MatchPolicy.SUBSTRING:
            return any(identifier in member for member in self.members)
        return identifier in self.members


class TimeZoneOption(NamedTuple):
    index: int
    value: str
    label: str


class TimeZoneCatalog:
    """
    Immutable catalog of time zone display groups

    Build it once with :meth:`build` and pass it to whoever needs it.
    """

    def __init__(self, groups: Iterable[TimeZoneGroup], policy: MatchPolicy = MatchPolicy.EXACT):
        self._logger = logging.getLogger(__name__)
        self._groups: Tuple[TimeZoneGroup, ...] = tuple(groups)
        self._policy = policy

    @classmethod
    def build(cls, policy: MatchPolicy = MatchPolicy.EXACT) -> "TimeZoneCatalog":
        return cls((TimeZoneGroup(tuple(members), label) for members, label in TIME_ZONE_TABLE), policy)

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    @property
    def groups(self) -> Tuple[TimeZoneGroup, ...]:
        return self._groups

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(group.canonical for group in self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[TimeZoneGroup]:
        return iter(self._groups)

    def find(self, identifier: str) -> Optional[TimeZoneGroup]:
        """
        Find the first group matching the identifier

        :param identifier: Time zone identifier, i.e. "Europe/Prague"
        :return: Matching group or None
        """
        for group in self._groups:
            if group.matches(identifier, self._policy):
                return group
        return None

    def resolve(self, identifier: str) -> TimeZoneGroup:
        """
        Resolve time zone identifier to its display group

        Groups are scanned in table order, first match wins.

        :param identifier: Time zone identifier, i.e. "Europe/Prague"
        :return: Matching group
        :raises TimeZoneNotFound: when no group matches
        """
        group = self.find(identifier)
        if group is None:
            raise TimeZoneNotFound(identifier)
        self._logger.debug("Time zone %s resolved to %s", identifier, group.canonical)
        return group

    def enumerate_for_display(self, localize: Optional[Callable[[str], str]] = None) -> Iterator[TimeZoneOption]:
        """
        Enumerate choices for a time zone selector

        Every call starts a new pass over the catalog.

        :param localize: Optional label translation function
        :return: Iterator of (index, canonical value, label)
        """
        for index, group in enumerate(self._groups):
            label = localize(group.label) if localize else group.label
            yield TimeZoneOption(index, group.canonical, label)

"""Readers for the local user, group, and timezone facts.

The passwd and group readers propagate ``OSError``: a host whose account
databases cannot be read has no meaningful snapshot. Timezone lookup is
total and falls back to ``Etc/UTC``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from saltbox_facts.config.models import PathsConfig
from saltbox_facts.domain.types import GroupData, TimezoneData, UserData

DEFAULT_TIMEZONE = "Etc/UTC"
_ZONEINFO_MARKER = "zoneinfo/"


def parse_group_lines(content: str) -> dict[str, GroupData]:
    """Parse ``name:password:gid[:members]`` records.

    Lines with fewer than three fields are skipped. An empty member field
    yields ``[""]``, a missing one ``[]``.
    """
    data: dict[str, GroupData] = {}
    for line in content.splitlines():
        parts = line.split(":")
        if len(parts) < 3:
            continue
        members = parts[3].split(",") if len(parts) > 3 else []
        data[parts[0]] = GroupData(gid=parts[2], group_list=members)
    return data


def parse_passwd_lines(content: str) -> dict[str, UserData]:
    """Parse ``name:password:uid:gid:comment:home:shell`` records."""
    data: dict[str, UserData] = {}
    for line in content.splitlines():
        parts = line.split(":")
        if len(parts) < 7:
            continue
        name, _, uid, gid, comment, home, shell = parts[:7]
        data[name] = UserData(uid=uid, gid=gid, comment=comment, home=home, shell=shell)
    return data


def parse_groups(path: Path) -> dict[str, GroupData]:
    return parse_group_lines(path.read_text(encoding="utf-8"))


def parse_users(path: Path) -> dict[str, UserData]:
    return parse_passwd_lines(path.read_text(encoding="utf-8"))


def timezone_from_etc_timezone(content: str) -> str | None:
    tz = content.strip()
    return tz or None


def timezone_from_localtime_target(target: str) -> str | None:
    """Extract ``Region/City`` from a ``.../zoneinfo/Region/City`` link target.

    Examples:
        >>> timezone_from_localtime_target("/usr/share/zoneinfo/Europe/Copenhagen")
        'Europe/Copenhagen'
        >>> timezone_from_localtime_target("/var/lib/custom/localtime") is None
        True
    """
    index = target.find(_ZONEINFO_MARKER)
    if index == -1:
        return None
    tz = target[index + len(_ZONEINFO_MARKER) :].strip()
    return tz or None


def get_timezone(paths: PathsConfig, environ: Mapping[str, str] | None = None) -> TimezoneData:
    """Resolve the system timezone.

    Checks, in order: the ``TZ`` variable, ``/etc/timezone``, and the
    ``/etc/localtime`` symlink target.
    """
    env = os.environ if environ is None else environ
    tz = env.get("TZ")
    if tz is not None:
        return TimezoneData(timezone=tz)

    try:
        tz = timezone_from_etc_timezone(paths.etc_timezone.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        tz = None
    if tz:
        return TimezoneData(timezone=tz)

    try:
        tz = timezone_from_localtime_target(os.readlink(paths.localtime))
    except OSError:
        tz = None
    if tz:
        return TimezoneData(timezone=tz)

    return TimezoneData(timezone=DEFAULT_TIMEZONE)

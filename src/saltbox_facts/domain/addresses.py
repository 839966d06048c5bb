"""Address literal validation and IPv6 capability detection.

Both functions are pure and total: they never raise on malformed input.
"""

from __future__ import annotations

import ipaddress

from saltbox_facts.domain.types import AddressFamily

# Scope field value in /proc/net/if_inet6 marking a global-scope address.
GLOBAL_SCOPE = "00"

# address, ifindex, prefix length, scope, flags, device name
_IF_INET6_FIELDS = 6
_SCOPE_INDEX = 3


def validate_address(candidate: str, family: AddressFamily) -> bool:
    """Return True iff *candidate* is a bare literal address of *family*.

    The caller trims whitespace; untrimmed input is rejected.

    Examples:
        >>> validate_address("192.168.1.1", AddressFamily.IPV4)
        True
        >>> validate_address("192.168.1.1", AddressFamily.IPV6)
        False
        >>> validate_address("::1", AddressFamily.IPV6)
        True
    """
    if not isinstance(candidate, str) or candidate != candidate.strip():
        return False
    parser = ipaddress.IPv4Address if family is AddressFamily.IPV4 else ipaddress.IPv6Address
    try:
        address = parser(candidate)
    except ValueError:
        return False
    # Zone-scoped literals ("fe80::1%eth0") are not a public address.
    return getattr(address, "scope_id", None) is None


def has_global_ipv6(content: str) -> bool:
    """Scan if_inet6-format *content* for a global-scope interface address.

    Lines with fewer than six fields are skipped. Stops at the first match.
    """
    for line in content.splitlines():
        fields = line.split()
        if len(fields) < _IF_INET6_FIELDS:
            continue
        if fields[_SCOPE_INDEX] == GLOBAL_SCOPE:
            return True
    return False

"""Host network identity lookup via psutil.

Interfaces are visited in the order psutil reports them. An interface is
treated as loopback if its hardware address is all zeros or any of its IP
addresses is a loopback address.
"""

import ipaddress
import socket

import psutil

from src.sf_common.errors import NetworkIdentityError, NoEligibleInterfaceError

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _parse_mac(address: str) -> bytes:
    return bytes(int(part, 16) for part in address.replace("-", ":").split(":"))


def _is_loopback_ip(address: str) -> bool:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


def first_hardware_address() -> bytes:
    """Return the MAC of the first non-loopback interface that has one.

    Raises:
        NetworkIdentityError: enumeration failed or reported no interfaces.
        NoEligibleInterfaceError: no interface qualified.
    """
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, RuntimeError) as exc:
        raise NetworkIdentityError(str(exc)) from exc
    if not interfaces:
        raise NetworkIdentityError("no interfaces reported")

    for addrs in interfaces.values():
        if any(a.family in _IP_FAMILIES and _is_loopback_ip(a.address) for a in addrs):
            continue
        for addr in addrs:
            if addr.family != psutil.AF_LINK or not addr.address:
                continue
            try:
                mac = _parse_mac(addr.address)
            except ValueError:
                continue
            if mac and any(mac):
                return mac
    raise NoEligibleInterfaceError()

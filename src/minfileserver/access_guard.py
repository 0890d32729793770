"""Classification of caller addresses as local or external."""

import ipaddress
from typing import Optional, Tuple, Union

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

LOCAL_NETWORKS: Tuple[IPNetwork, ...] = (
    ipaddress.ip_network("127.0.0.0/8"),  # IPv4 loopback
    ipaddress.ip_network("::1/128"),  # IPv6 loopback
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
)


def is_local_address(address: Optional[str]) -> bool:
    """Report whether a caller address is loopback or in a private IPv4 range.

    IPv4 addresses embedded in IPv6 (``::ffff:10.0.0.1``) are classified by
    their IPv4 form. Missing or unparseable addresses are never local.

    Example:
        >>> is_local_address("192.168.1.20")
        True
        >>> is_local_address("::ffff:127.0.0.1")
        True
        >>> is_local_address("8.8.8.8")
        False
        >>> is_local_address("not-an-ip")
        False
    """
    if not address:
        return False
    try:
        ip = ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return False

    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return any(ip in network for network in LOCAL_NETWORKS)

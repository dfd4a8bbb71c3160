"""Network collector for finding the primary IPv4 address."""
import ipaddress
import logging
import socket
from typing import Dict, List

import psutil

from ..config.config import Config
from ..core.errors import MetricError

logger = logging.getLogger(__name__)


def select_ipv4(interfaces: Dict[str, List]) -> str:
    """Return the first non-loopback IPv4 address in interface enumeration order."""
    for name, addrs in interfaces.items():
        for addr in addrs:
            if addr.family != socket.AF_INET:
                continue
            if ipaddress.ip_address(addr.address).is_loopback:
                continue
            logger.debug("using address %s from interface %s", addr.address, name)
            return addr.address

    raise MetricError("no suitable IP address found")


class NetworkCollector:
    """Collects the host's primary IP address from the interface table."""

    def __init__(self, config: Config):
        """Initialize the network collector."""
        self.config = config

    def get_ip_address(self) -> str:
        """Get the first non-loopback IPv4 address."""
        try:
            interfaces = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            raise MetricError(str(e)) from e
        return select_ipv4(interfaces or {})

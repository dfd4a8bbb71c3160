"""Pytest configuration and shared fixtures for hostsnap tests."""

import socket
from collections import namedtuple

import psutil
import pytest

from hostsnap.config.config import Config

GIB = 1024 ** 3

# Same field layout as the named tuples psutil returns
snicaddr = namedtuple("snicaddr", ["family", "address", "netmask", "broadcast", "ptp"])
shwtemp = namedtuple("shwtemp", ["label", "current", "high", "critical"])
svmem = namedtuple("svmem", ["total", "available", "percent", "used", "free"])
sdiskusage = namedtuple("sdiskusage", ["total", "used", "free", "percent"])


def ipv4(address):
    return snicaddr(socket.AF_INET, address, "255.255.255.0", None, None)


def ipv6(address):
    return snicaddr(socket.AF_INET6, address, "ffff:ffff:ffff:ffff::", None, None)


def temp(label, current):
    return shwtemp(label, current, None, None)


def fake_cpu_percent(per_core, aggregate):
    """Stand-in for psutil.cpu_percent returning fixed per-core and aggregate readings."""
    def cpu_percent(interval=None, percpu=False):
        return list(per_core) if percpu else aggregate
    return cpu_percent


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def fake_host(monkeypatch):
    """
    Replace every OS query with a healthy, deterministic host.

    Tests that need a failing metric patch the relevant call again
    after requesting this fixture.
    """
    monkeypatch.setattr(socket, "gethostname", lambda: "test-host")
    monkeypatch.setattr(psutil, "net_if_addrs", lambda: {
        "lo": [ipv4("127.0.0.1")],
        "eth0": [ipv4("192.168.1.5"), ipv6("fe80::1")],
    })
    monkeypatch.setattr(psutil, "cpu_percent", fake_cpu_percent([10.0, 20.0], 15.0))
    monkeypatch.setattr(psutil, "virtual_memory", lambda: svmem(
        # "available" includes reclaimable cache, so psutil's percent differs from used / total
        total=8 * GIB, available=3 * GIB, percent=62.5, used=4 * GIB, free=1 * GIB,
    ))
    monkeypatch.setattr(psutil, "disk_usage", lambda path: sdiskusage(
        total=100 * GIB, used=25 * GIB, free=75 * GIB, percent=25.0,
    ))
    monkeypatch.setattr(psutil, "sensors_temperatures", lambda: {
        "acpitz": [temp("", 40.0)],
        "coretemp": [temp("Core 0", 55.2)],
    }, raising=False)
    return monkeypatch

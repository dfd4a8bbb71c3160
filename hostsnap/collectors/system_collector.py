"""System metrics collector for hostname, CPU, memory, disk, and temperature."""
import logging
import socket
from typing import List, Optional, Sequence

import psutil

from .system_models import DiskUsage, MemoryUsage, TemperatureSensor
from ..config.config import Config
from ..core.errors import MetricError

logger = logging.getLogger(__name__)


def sensor_key(chip: str, label: Optional[str]) -> str:
    """Build a sensor key like ``coretemp_core_0`` from a chip name and sensor label."""
    key = f"{chip}_{label}" if label else chip
    return key.strip().lower().replace(" ", "_")


def flatten_sensors(temps: dict) -> List[TemperatureSensor]:
    """Flatten psutil's {chip: [shwtemp, ...]} mapping into sensors, keeping platform order."""
    sensors = []
    for chip, entries in temps.items():
        for entry in entries:
            sensors.append(TemperatureSensor(sensor_key(chip, entry.label), float(entry.current)))
    return sensors


def select_temperature(sensors: Sequence[TemperatureSensor], keywords: Sequence[str]) -> float:
    """Pick the first CPU-like sensor, falling back to the first sensor at all."""
    if not sensors:
        raise MetricError("system temperature not available: no sensors found")

    for sensor in sensors:
        key = sensor.key.lower()
        if any(keyword in key for keyword in keywords):
            return sensor.current

    return sensors[0].current


class SystemCollector:
    """Collects system-level metrics like CPU, memory, disk usage."""

    def __init__(self, config: Config):
        """Initialize the system collector."""
        self.config = config

    def get_hostname(self) -> str:
        """Get the configured hostname of this machine."""
        try:
            hostname = socket.gethostname()
        except OSError as e:
            raise MetricError(str(e)) from e
        if not hostname:
            raise MetricError("hostname not available")
        return hostname

    def get_cpu_utilization(self) -> float:
        """Get aggregate CPU usage without blocking.

        Uses psutil's zero-interval mode, which compares against the counters
        seen on the previous call (or at import time for the first call).
        """
        try:
            # Per-core and aggregate readings keep separate counters in psutil
            samples = psutil.cpu_percent(interval=None, percpu=True)
            if not samples:
                raise MetricError("no cpu percentages returned")
            percent = psutil.cpu_percent(interval=None)
        except (OSError, psutil.Error) as e:
            raise MetricError(str(e)) from e

        logger.debug("cpu %.2f%% over %d cores: %s", percent, len(samples), samples)
        return min(max(percent, 0.0), 100.0)

    def get_memory_utilization(self) -> MemoryUsage:
        """Get physical memory usage."""
        try:
            vm = psutil.virtual_memory()
        except (OSError, psutil.Error) as e:
            raise MetricError(str(e)) from e
        # psutil's own percent is based on "available"; report used / total
        percent = vm.used / vm.total * 100 if vm.total else 0.0
        return MemoryUsage(total=vm.total, used=vm.used, percent=percent)

    def get_disk_utilization(self) -> DiskUsage:
        """Get usage of the filesystem mounted at the configured path."""
        path = self.config.collection.disk_path
        try:
            usage = psutil.disk_usage(path)
        except (OSError, psutil.Error) as e:
            raise MetricError(str(e)) from e
        return DiskUsage(path=path, total=usage.total, used=usage.used, percent=usage.percent)

    def get_system_temperature(self) -> float:
        """Get system temperature from available sensors."""
        # Not every platform exposes sensors_temperatures at all
        read_sensors = getattr(psutil, "sensors_temperatures", None)
        if read_sensors is None:
            raise MetricError("failed to get sensor temperatures: not supported on this platform")

        try:
            temps = read_sensors()
        except (OSError, psutil.Error) as e:
            raise MetricError(f"failed to get sensor temperatures: {e}") from e

        sensors = flatten_sensors(temps or {})
        logger.debug("found %d temperature sensors", len(sensors))
        return select_temperature(sensors, self.config.collection.temperature_keywords)

"""System data models for system collector."""
from dataclasses import dataclass


@dataclass
class MemoryUsage:
    """Physical memory usage in bytes."""
    total: int
    used: int
    percent: float


@dataclass
class DiskUsage:
    """Filesystem usage in bytes for one mount path."""
    path: str
    total: int
    used: int
    percent: float


@dataclass
class TemperatureSensor:
    key: str  # e.g. "coretemp_core_0"
    current: float  # Celsius

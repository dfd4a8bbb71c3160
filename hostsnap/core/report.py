"""Report assembly: run each collector once and render one line per metric."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from .errors import MetricError
from ..collectors.network_collector import NetworkCollector
from ..collectors.system_collector import SystemCollector
from ..collectors.system_models import DiskUsage, MemoryUsage
from ..config.config import Config

logger = logging.getLogger(__name__)

GIB = 1024 ** 3


@dataclass
class ReportLine:
    """One rendered report line."""
    text: str
    ok: bool = True


def format_gb(num_bytes: int) -> str:
    """Render a byte count as binary gigabytes with two decimals."""
    return f"{num_bytes / GIB:.2f}GB"


def format_memory(mem: MemoryUsage) -> str:
    return f"Memory: Used {format_gb(mem.used)} / Total {format_gb(mem.total)} ({mem.percent:.2f}%)"


def format_disk(disk: DiskUsage) -> str:
    return (
        f"Disk ({disk.path}): Used {format_gb(disk.used)} / "
        f"Total {format_gb(disk.total)} ({disk.percent:.2f}%)"
    )


def collect_line(
    name: str,
    query: Callable[[], object],
    render: Callable[[object], str],
    render_error: Callable[[str], str],
) -> ReportLine:
    """Run one collector and turn its value or failure into a report line."""
    try:
        value = query()
    except MetricError as e:
        logger.info("%s unavailable: %s", name, e)
        return ReportLine(render_error(str(e)), ok=False)
    except Exception as e:
        logger.debug("unexpected failure collecting %s", name, exc_info=True)
        return ReportLine(render_error(str(e) or type(e).__name__), ok=False)
    return ReportLine(render(value))


class ReportBuilder:
    """Builds the fixed-order snapshot report."""

    def __init__(
        self,
        config: Config,
        system: Optional[SystemCollector] = None,
        network: Optional[NetworkCollector] = None,
    ):
        """Initialize the report builder with its collectors."""
        self.config = config
        self.system = system or SystemCollector(config)
        self.network = network or NetworkCollector(config)

    def build(self, now: Optional[datetime] = None) -> List[ReportLine]:
        """Collect every metric in order and return the rendered lines."""
        now = now or datetime.now()
        lines = [
            ReportLine("Hello"),
            ReportLine(f"Current time: {now.strftime(self.config.display.time_format)}"),
        ]

        lines.append(collect_line(
            "hostname",
            self.system.get_hostname,
            lambda hostname: f"Hostname: {hostname}",
            lambda reason: f"Error getting hostname: {reason}",
        ))
        lines.append(collect_line(
            "ip address",
            self.network.get_ip_address,
            lambda ip: f"IP Address: {ip}",
            lambda reason: f"Error getting IP address: {reason}",
        ))
        lines.append(collect_line(
            "cpu utilization",
            self.system.get_cpu_utilization,
            lambda percent: f"CPU Utilization: {percent:.2f}%",
            lambda reason: f"Error getting CPU utilization: {reason}",
        ))
        lines.append(collect_line(
            "memory utilization",
            self.system.get_memory_utilization,
            format_memory,
            lambda reason: f"Error getting memory utilization: {reason}",
        ))
        lines.append(collect_line(
            "disk utilization",
            self.system.get_disk_utilization,
            format_disk,
            lambda reason: f"Error getting disk utilization: {reason}",
        ))
        # Temperature keeps its historical "N/A" form instead of an error line
        lines.append(collect_line(
            "temperature",
            self.system.get_system_temperature,
            lambda celsius: f"System Temperature: {celsius:.1f}°C",
            lambda reason: f"System Temperature: N/A ({reason})",
        ))

        return lines

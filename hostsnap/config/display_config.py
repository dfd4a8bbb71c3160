"""Display configuration data structure."""
from dataclasses import dataclass

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class DisplayConfig:
    """Display preferences configuration."""
    show_colors: bool = True
    time_format: str = DEFAULT_TIME_FORMAT

    def __post_init__(self):
        """Fix empty values and reject values of the wrong type."""
        if not isinstance(self.show_colors, bool):
            raise TypeError(f"show_colors must be true or false, got {self.show_colors!r}")
        if self.time_format is None or self.time_format == "":
            self.time_format = DEFAULT_TIME_FORMAT
        elif not isinstance(self.time_format, str):
            raise TypeError(f"time_format must be a string, got {self.time_format!r}")

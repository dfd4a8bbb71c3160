"""Collection settings configuration."""
from dataclasses import dataclass, field
from typing import List

DEFAULT_DISK_PATH = "/"
DEFAULT_TEMPERATURE_KEYWORDS = ["core", "cpu", "thermal"]


@dataclass
class CollectionConfig:
    """Where and how the collectors look for their data."""
    disk_path: str = DEFAULT_DISK_PATH
    temperature_keywords: List[str] = field(
        default_factory=lambda: list(DEFAULT_TEMPERATURE_KEYWORDS)
    )

    def __post_init__(self):
        """Fix empty values and reject values of the wrong type."""
        if self.disk_path is None or self.disk_path == "":
            self.disk_path = DEFAULT_DISK_PATH
        elif not isinstance(self.disk_path, str):
            raise TypeError(f"disk_path must be a string, got {self.disk_path!r}")

        if self.temperature_keywords is None or self.temperature_keywords == []:
            self.temperature_keywords = list(DEFAULT_TEMPERATURE_KEYWORDS)
        elif not isinstance(self.temperature_keywords, list):
            raise TypeError(
                f"temperature_keywords must be a list, got {self.temperature_keywords!r}"
            )
        elif not all(isinstance(k, str) and k for k in self.temperature_keywords):
            raise TypeError("temperature_keywords must only contain non-empty strings")

        # Sensor keys are matched lower-cased
        self.temperature_keywords = [k.lower() for k in self.temperature_keywords]

"""Main configuration data structure."""
from dataclasses import dataclass, field
from .display_config import DisplayConfig
from .collection_config import CollectionConfig


@dataclass
class Config:
    """Main configuration class."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    collection: CollectionConfig = field(default_factory=CollectionConfig)

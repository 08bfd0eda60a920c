from kgtools.config.loader import load_yaml, save_yaml
from kgtools.config.settings import KGToolsConfig, LocatorConfig, LoggingConfig, load_config

__all__ = [
    "KGToolsConfig",
    "LocatorConfig",
    "LoggingConfig",
    "load_config",
    "load_yaml",
    "save_yaml",
]

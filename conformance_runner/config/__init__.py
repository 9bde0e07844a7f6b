from .store import CONFIG_SCHEMA, ConfigStore

__all__ = [
    "CONFIG_SCHEMA",
    "ConfigStore",
]

from .config import MissingKeyPolicy, StoreSettings, load_settings, DEFAULT_CONFIG_PATH

__all__ = ["MissingKeyPolicy", "StoreSettings", "load_settings", "DEFAULT_CONFIG_PATH"]

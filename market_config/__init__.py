from .log_setup import configure_logging
from .settings import MarketSettings, get_settings

__all__ = ["MarketSettings", "configure_logging", "get_settings"]

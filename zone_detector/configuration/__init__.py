from .settings import ZoneSettings, get_zone_settings, load_zone_settings

__all__ = ["ZoneSettings", "get_zone_settings", "load_zone_settings"]

from .config import RenderSettings, DEFAULT_SETTINGS

__all__ = ["RenderSettings", "DEFAULT_SETTINGS"]

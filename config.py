"""
Configuration settings for the GPP calculator
"""
import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Config:
    """Configuration read from the environment"""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    # Feed the elevation-adjusted pressure into the humidity ratio.
    # Off by default: elevation is computed but the standard atmosphere is used.
    USE_ELEVATION_PRESSURE: bool = _env_flag("GPP_USE_ELEVATION_PRESSURE")

    # Demo harness
    DEFAULT_ELEVATION: float = float(os.getenv("GPP_DEFAULT_ELEVATION", "0"))

    @classmethod
    def get_log_level(cls) -> str:
        """Log level name, falling back to WARNING for unknown values"""
        level = cls.LOG_LEVEL.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return "WARNING"
        return level


config = Config()

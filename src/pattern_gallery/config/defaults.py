# src/pattern_gallery/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    STDERR = "stderr"
    BOTH = "both"


DEFAULT_CONFIG = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${PATTERN_GALLERY_LOG_LEVEL:WARNING}",
        "destination": "${PATTERN_GALLERY_LOG_DESTINATION:stderr}",
        "file_path": "${PATTERN_GALLERY_LOG_DIR:logs}/pattern-gallery.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Observer broadcast loop
    "observer": {
        "interval_seconds": 1.0,
        "duration_seconds": 10.0,
        "observer_ids": [1, 2, 3],
    },
}

# Environment variable -> (section, key, type)
ENV_OVERRIDES = {
    "PATTERN_GALLERY_OBSERVER_INTERVAL": ("observer", "interval_seconds", float),
    "PATTERN_GALLERY_OBSERVER_DURATION": ("observer", "duration_seconds", float),
}

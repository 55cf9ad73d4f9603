"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-gallery"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
__version__ = "0.1.0"
VERSION = __version__
DESCRIPTION = "Classic design-pattern demonstrations: adapter, builder, observer, strategy, singleton"

# Prefix for environment variable overrides
ENV_PREFIX = "PATTERN_GALLERY_"

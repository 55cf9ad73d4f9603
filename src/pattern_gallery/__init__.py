"""Pattern Gallery - Root Package.

A collection of classic object-oriented design-pattern demonstrations.
Each example is a standalone leaf with a zero-argument ``run()`` entry
point that prints illustrative output.

Key Components:
    - domain: Value records and ports used by the examples
    - application: Example entry points and the strategy operators
    - infrastructure: Logging, singleton access, DI, event broadcast, adapters
    - config: Configuration schemas and loading
    - cli: Command-line entry point
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> pattern-gallery observer --duration 3
    >>> python -m pattern_gallery strategy
"""

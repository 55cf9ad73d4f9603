"""Pattern example entry points.

Each module exposes ``run()``. Examples never import one another.
"""

from pattern_gallery.application.examples.registry import Example, ExampleRegistry, default_examples

__all__ = ["Example", "ExampleRegistry", "default_examples"]

"""Application layer - example entry points and strategy operators."""

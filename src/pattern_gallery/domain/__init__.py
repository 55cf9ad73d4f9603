"""Domain layer - value records and ports shared by the pattern examples."""

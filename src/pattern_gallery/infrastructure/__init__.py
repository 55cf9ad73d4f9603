"""Infrastructure layer - logging, singleton access, DI, event broadcast, adapters."""

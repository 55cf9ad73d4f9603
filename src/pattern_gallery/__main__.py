"""Allow running the gallery with ``python -m pattern_gallery``."""

from pattern_gallery.cli.main import main

if __name__ == "__main__":
    main()

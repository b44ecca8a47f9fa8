"""Infrastructure layer: concrete caches, codecs, configuration, logging and CLI."""

"""Domain layer: models, parsers and formatters with no I/O."""

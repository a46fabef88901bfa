"""Client configuration: constants and option models."""

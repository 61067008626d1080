"""Core layer - paths, engine, configuration, registry and errors."""

"""Core infrastructure: logging, exceptions, paths, CLI statistics."""

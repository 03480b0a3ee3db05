"""Core infrastructure: paths, config, exceptions, logging, validation."""

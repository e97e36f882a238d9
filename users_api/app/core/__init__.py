"""Core infrastructure: settings, logging, the in-memory store and error handlers."""

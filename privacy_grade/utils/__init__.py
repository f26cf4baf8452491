"""Shared helpers: logging, URL parsing, serialization."""

"""Core package: configuration, enums, errors and shared helpers."""

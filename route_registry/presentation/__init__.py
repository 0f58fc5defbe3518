"""Presentation layer: route registration and the Swagger document."""

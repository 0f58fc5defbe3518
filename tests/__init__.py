"""Test suite for route_registry.

Test structure:
- unit/: Unit tests - builders, document store, filter and pipeline in isolation
- api/: API tests - full request cycle through the Starlette test client
"""

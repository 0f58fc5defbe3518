"""API tests package.

End-to-end tests through the Starlette test client. Tests the complete
request/response cycle including:
- Middleware and the authorization hook
- Per-requester /spec documents
- Error mapping and HTTP status codes
- Standard resource routes
"""

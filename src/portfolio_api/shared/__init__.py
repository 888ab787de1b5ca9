"""
Shared Kernel
=============

Cross-cutting pieces used by every bounded context:
- API: middleware, exception handlers, request body parsing, rate limiting
- Infrastructure: structured logging
"""

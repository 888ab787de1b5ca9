"""
Downloads Module
================

Bounded context for CV download requests: who asked for the CV and why.
Requests land in the "downloads" collection. Not rate limited.
"""

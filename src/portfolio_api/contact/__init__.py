"""
Contact Module
==============

Bounded context for contact-form messages.

Responsibilities:
- Throttle submissions per client address
- Validate name, email, subject and message
- Persist accepted messages to the "contacts" collection
"""

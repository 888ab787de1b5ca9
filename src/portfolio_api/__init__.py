"""
Portfolio API
=============

Backend for a personal portfolio site.

Modules:
- Contact: validate and store contact-form messages
- Downloads: record who downloaded the CV and why
"""

__version__ = "1.0.0"

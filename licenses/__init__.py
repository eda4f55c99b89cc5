"""
Licenses module - license records and their tokens.

This module handles:
- LicenseRecord entity and license key generation
- Token encoding and decoding
- License validation against a host and date
"""

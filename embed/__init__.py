"""
Embed module - Delivery of the embeddable license-checking content.

This module handles:
- Per-request CSP nonce issuance
- Content-Security-Policy header construction
- Loading and rendering the embed template
- Building embed URLs and script tags for third-party pages
"""

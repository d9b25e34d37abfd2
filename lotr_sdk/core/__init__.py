"""
Core helpers package for the One API SDK.

This package contains low-level infrastructure: transports,
configuration, authentication headers, rate-limit metadata and the
error taxonomy.  Keeping these helpers in a dedicated package makes it
easy to swap implementations or customise behaviour for testing.
"""

__all__ = []

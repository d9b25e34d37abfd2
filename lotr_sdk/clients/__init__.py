"""
Resource clients and the retrying transport decorator.
"""

__all__ = []

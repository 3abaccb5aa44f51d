"""
Rate limiting package for the CRPT client.

Holds the fixed-window permit pool that caps submissions per period and the
background task that refills it at every window boundary.
"""

from .permit_pool import PermitPool, PermitReplenisher

__all__ = ["PermitPool", "PermitReplenisher"]

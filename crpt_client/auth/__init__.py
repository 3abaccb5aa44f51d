"""
Authentication package for the CRPT client.
"""

from .session import AuthSession, CertificateSigner

__all__ = ["AuthSession", "CertificateSigner"]

"""
Adapters package for the CRPT client.

Contains the HTTP request executor shared by authentication and document
submission. It encapsulates:

- Sending prepared httpx requests
- Mapping transport faults and error responses to shared errors
- Parsing successful bodies into wire models

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .request_executor import RequestExecutor

__all__ = ["RequestExecutor"]

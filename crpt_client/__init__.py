"""
CRPT document API client package.

The client submits documents to the CRPT marking system while enforcing:
- Authentication: two-step certificate handshake yielding a bearer token
- Rate limiting: fixed-window permit pool refilled by a background task
- Typed outcomes: every response maps to a model or a shared error

Structure:
- client: DocumentClient facade composing the pieces below.
- adapters: Request executor mapping HTTP responses to models/errors.
- auth: Certificate authentication session holding the token.
- ratelimit: Permit pool and its replenisher.
- domain: Catalog enums and wire models.
"""

from .client import DocumentClient
from .domain import (
    Environment,
    DocumentFormat,
    DocumentType,
    ProductGroup,
    Document,
    Description,
    Product,
    CreateDocumentResponse,
)
from shared.errors import (
    CrptClientException,
    ConfigurationError,
    NotAuthenticatedError,
    RateLimitExceededError,
    TransportError,
    ApiError,
    DeserializationError,
    ClientClosedError,
)

__all__ = [
    "DocumentClient",
    "Environment",
    "DocumentFormat",
    "DocumentType",
    "ProductGroup",
    "Document",
    "Description",
    "Product",
    "CreateDocumentResponse",
    "CrptClientException",
    "ConfigurationError",
    "NotAuthenticatedError",
    "RateLimitExceededError",
    "TransportError",
    "ApiError",
    "DeserializationError",
    "ClientClosedError",
]

"""
Domain package: static catalogs and wire models of the CRPT document API.
"""

from .catalog import Environment, DocumentFormat, ProductGroup, DocumentType
from .models import (
    Description,
    Product,
    Document,
    AuthKeyResponse,
    AuthRequest,
    AuthResponse,
    ApiErrorBody,
    CreateDocumentRequest,
    CreateDocumentResponse,
    encode_document,
    decode_document,
)

__all__ = [
    "Environment",
    "DocumentFormat",
    "ProductGroup",
    "DocumentType",
    "Description",
    "Product",
    "Document",
    "AuthKeyResponse",
    "AuthRequest",
    "AuthResponse",
    "ApiErrorBody",
    "CreateDocumentRequest",
    "CreateDocumentResponse",
    "encode_document",
    "decode_document",
]

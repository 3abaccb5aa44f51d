"""
Document and wire models for the CRPT document API.

Field aliases are the names used on the wire; models accept either the alias
or the Python attribute name on input.
"""

import base64
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for every model exchanged with the remote API."""

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> str:
        """Serialize with wire names, leaving out unset optional fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Description(WireModel):
    """Description part of a document."""
    participant_inn: Optional[str] = None


class Product(WireModel):
    """One product record of an introduce-goods document."""
    certificate_document: Optional[str] = None
    certificate_document_date: Optional[date] = None
    certificate_document_number: Optional[str] = None
    owner_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[date] = None
    tnved_code: Optional[str] = None
    uit_code: Optional[str] = None
    uitu_code: Optional[str] = None


class Document(WireModel):
    """Introduce-goods document carried base64-encoded in ``product_document``."""
    description: Optional[Description] = None
    doc_id: Optional[str] = None
    doc_status: Optional[str] = None
    doc_type: Optional[str] = None
    import_request: bool = Field(default=False, alias="importRequest")
    owner_inn: Optional[str] = None
    participant_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[date] = None
    production_type: Optional[str] = None
    products: Optional[List[Product]] = None
    reg_date: Optional[date] = None
    reg_number: Optional[str] = None


def encode_document(document: Document) -> str:
    """Serialize a document to JSON and base64-encode the UTF-8 text."""
    return base64.b64encode(document.to_json().encode("utf-8")).decode("ascii")


def decode_document(payload: str) -> Document:
    """Inverse of :func:`encode_document`."""
    return Document.model_validate_json(base64.b64decode(payload).decode("utf-8"))


class AuthKeyResponse(WireModel):
    """Challenge issued by ``GET /auth/cert/key``."""
    uuid: str
    data: str


class AuthRequest(WireModel):
    """Signed challenge posted to ``/auth/cert/``."""
    uuid: str
    data: str


class AuthResponse(WireModel):
    """Result of ``POST /auth/cert/``: a token, or an error description."""
    token: Optional[str] = None
    code: Optional[str] = None
    error_message: Optional[str] = None
    description: Optional[str] = None


class ApiErrorBody(WireModel):
    """Error envelope returned with 4xx/5xx responses."""
    error_message: Optional[str] = None
    description: Optional[str] = None


class CreateDocumentRequest(WireModel):
    """Body of ``POST /lk/documents/create``."""
    document_format: str
    product_document: str
    product_group: str
    signature: str
    type: str


class CreateDocumentResponse(WireModel):
    """Result of a document submission."""
    document_id: Optional[str] = None
    status: Optional[str] = None

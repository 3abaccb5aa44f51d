"""
Unit tests for catalog enums and wire models.
"""

import base64
import json
from datetime import date

import pytest

from crpt_client.domain.catalog import DocumentFormat, DocumentType, Environment, ProductGroup
from crpt_client.domain.models import (
    AuthResponse,
    CreateDocumentRequest,
    Description,
    Document,
    Product,
    decode_document,
    encode_document,
)
from shared.config import ClientSettings
from shared.test_helpers import test_data_factory


class TestCatalog:
    """Catalog lookups."""

    def test_product_group_codes(self):
        """Product groups carry their lowercase API codes."""
        assert ProductGroup.MILK.value == "milk"
        assert ProductGroup("wheelchairs") is ProductGroup.WHEELCHAIRS
        assert len(ProductGroup) == 10

    def test_document_type_values_match_names(self):
        """Every document type is sent under its own name."""
        assert all(member.value == member.name for member in DocumentType)
        assert len(DocumentType) == 60
        assert DocumentType("LP_CANCEL_SHIPMENT_CROSSBORDER") is DocumentType.LP_CANCEL_SHIPMENT_CROSSBORDER

    def test_document_formats(self):
        """Manual, XML and CSV formats exist."""
        assert [f.value for f in DocumentFormat] == ["MANUAL", "XML", "CSV"]

    def test_environment_base_urls_strip_trailing_slash(self):
        """Configured base URLs are normalised."""
        settings = ClientSettings(production_base_url="https://prod.example/api/v3/", demo_base_url="https://demo.example/api/v3")

        assert Environment.PRODUCTION.base_url(settings) == "https://prod.example/api/v3"
        assert Environment.DEMO.base_url(settings) == "https://demo.example/api/v3"


class TestDocumentModel:
    """Document serialization."""

    @pytest.fixture
    def document(self):
        """Sample introduce-goods document."""
        return Document.model_validate(test_data_factory.create_test_document(
            products=[
                test_data_factory.create_test_product(),
                test_data_factory.create_test_product(uit_code="0104630037590265XYZ", uitu_code="UITU-2"),
            ]
        ))

    def test_wire_names(self, document):
        """Serialized JSON uses wire field names and ISO dates."""
        payload = json.loads(document.to_json())

        assert payload["importRequest"] is False
        assert "import_request" not in payload
        assert payload["description"] == {"participant_inn": "1234567890"}
        assert payload["production_date"] == date.today().isoformat()
        assert len(payload["products"]) == 2

    def test_unset_fields_are_omitted(self):
        """Optional fields left unset do not appear on the wire."""
        payload = json.loads(Document(doc_id="D1").to_json())

        assert payload == {"doc_id": "D1", "importRequest": False}

    def test_accepts_python_names(self):
        """Models can be built from attribute names as well as aliases."""
        document = Document(import_request=True, production_date=date(2024, 5, 1))

        assert document.import_request is True
        assert json.loads(document.to_json())["production_date"] == "2024-05-01"

    def test_base64_round_trip(self, document):
        """Encoding then decoding yields an equal document."""
        encoded = encode_document(document)

        assert decode_document(encoded) == document
        assert json.loads(base64.b64decode(encoded))["doc_id"] == "TEST-DOC-001"

    def test_round_trip_keeps_non_ascii_text(self):
        """UTF-8 text survives the base64 payload."""
        document = Document(
            production_type="Собственное производство",
            reg_number="РН-001",
            description=Description(participant_inn="7700000000"),
            products=[Product(tnved_code="6403", certificate_document_date=date(2024, 1, 31))],
        )

        assert decode_document(encode_document(document)) == document


class TestWireEnvelopes:
    """Request and response envelopes."""

    def test_create_document_request_fields(self):
        """The submission body has exactly the five API fields."""
        body = CreateDocumentRequest(
            document_format="MANUAL",
            product_document="e30=",
            product_group="milk",
            signature="sig",
            type="LP_INTRODUCE_GOODS"
        )

        assert set(json.loads(body.to_json())) == {
            "document_format", "product_document", "product_group", "signature", "type"
        }

    def test_auth_response_error_fields(self):
        """Authentication rejections parse into the error fields."""
        response = AuthResponse.model_validate_json(
            '{"code": "403", "error_message": "Invalid signature", "description": "Certificate not found"}'
        )

        assert response.token is None
        assert response.error_message == "Invalid signature"
        assert response.description == "Certificate not found"

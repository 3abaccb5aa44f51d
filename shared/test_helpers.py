"""
Test helper functions and factory methods for the CRPT access client.
"""

import asyncio
import json
from typing import Dict, Any, Optional, List, Callable
from datetime import date, timedelta

import httpx


TEST_BASE_URL = "http://crpt.test/api/v3"
TEST_INN = "1234567890"


class TestDataFactory:
    """Factory for creating test data."""

    __test__ = False

    @staticmethod
    def create_test_product(**overrides) -> Dict[str, Any]:
        """Create one product record in wire format."""
        product = {
            "certificate_document": "CERT-1",
            "certificate_document_date": (date.today() - timedelta(days=30)).isoformat(),
            "certificate_document_number": "CN-12345",
            "owner_inn": TEST_INN,
            "producer_inn": TEST_INN,
            "production_date": (date.today() - timedelta(days=7)).isoformat(),
            "tnved_code": "9405000000",
            "uit_code": "010463003759026521NBXARDD5DU2JWLY",
        }
        product.update(overrides)
        return product

    @staticmethod
    def create_test_document(products: Optional[List[Dict[str, Any]]] = None, **overrides) -> Dict[str, Any]:
        """Create an introduce-goods document in wire format."""
        document = {
            "description": {"participant_inn": TEST_INN},
            "doc_id": "TEST-DOC-001",
            "doc_status": "DRAFT",
            "doc_type": "LP_INTRODUCE_GOODS",
            "importRequest": False,
            "owner_inn": TEST_INN,
            "participant_inn": TEST_INN,
            "producer_inn": TEST_INN,
            "production_date": date.today().isoformat(),
            "production_type": "OWN_PRODUCTION",
            "products": products if products is not None else [TestDataFactory.create_test_product()],
            "reg_date": date.today().isoformat(),
            "reg_number": "RN-001-TEST",
        }
        document.update(overrides)
        return document


def stub_signer(data: str) -> str:
    """Pretend to sign a challenge with a qualified certificate."""
    return f"{data}-signed"


async def async_stub_signer(data: str) -> str:
    """Asynchronous variant of :func:`stub_signer`."""
    await asyncio.sleep(0)
    return f"{data}-signed"


def json_response(status_code: int, body: Any = None) -> httpx.Response:
    """Build a JSON response; ``None`` body means no content."""
    if body is None:
        return httpx.Response(status_code)
    content = body if isinstance(body, (str, bytes)) else json.dumps(body)
    return httpx.Response(status_code, content=content, headers={"Content-Type": "application/json"})


class RecordingHandler:
    """MockTransport handler that records requests and replays scripted responses.

    ``routes`` maps ``"METHOD /path"`` to either a response or a callable
    (plain or async) taking the request. ``delay`` keeps every request in
    flight for that many seconds, so concurrent callers overlap.
    """

    __test__ = False

    def __init__(self, routes: Dict[str, Any], delay: float = 0.0):
        self.routes = routes
        self.delay = delay
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)

        route = self.routes.get(f"{request.method} {request.url.path}")
        if route is None:
            return json_response(404, {"error_message": f"No route for {request.url.path}"})
        if callable(route):
            route = route(request)
            if asyncio.iscoroutine(route):
                route = await route
        # Fresh copy so a scripted response can be replayed many times
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    def bodies(self, method: str, path: str) -> List[Dict[str, Any]]:
        """Decoded JSON bodies of recorded requests to one route."""
        return [
            json.loads(request.content)
            for request in self.requests
            if request.method == method and request.url.path == path
        ]


def mock_http_client(handler: Callable) -> httpx.AsyncClient:
    """Create an AsyncClient whose network is the given handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def failing_handler(exc: Exception) -> Callable:
    """Handler raising a transport exception for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return handler


# Global instance for easy access
test_data_factory = TestDataFactory()

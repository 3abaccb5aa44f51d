"""
Mock CRPT server providing certificate authentication and document creation endpoints.
"""

import base64
import binascii
import uuid
from typing import Dict, Any, Optional, List, Tuple

from fastapi import FastAPI, APIRouter, Request, Header, Query
from fastapi.responses import JSONResponse, Response

from shared.config import get_settings
from shared.logging import configure_logging, get_logger


API_PREFIX = "/api/v3"

DOCUMENT_FIELDS = ("document_format", "product_document", "product_group", "signature", "type")


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error_message": message, **extra})


class MockCrptServer:
    """Mock CRPT document API implementation.

    Any non-empty signature of an issued challenge is accepted; the server
    never checks cryptography.
    """

    def __init__(self, port: int = 8090):
        self.port = port
        self.logger = get_logger("mock.crpt")
        self.app = FastAPI(title="Mock CRPT", version="1.0.0")

        # uuid -> challenge data
        self.challenges: Dict[str, str] = {}
        # issued bearer tokens
        self.tokens: List[str] = []
        # accepted submissions, in arrival order
        self.documents: List[Dict[str, Any]] = []
        self._forced_failure: Optional[Tuple[int, Optional[str]]] = None

        self._setup_routes()

    def fail_next_submission(self, status_code: int, message: Optional[str] = None):
        """Make the next document submission answer with an error."""
        self._forced_failure = (status_code, message)

    def _setup_routes(self):
        """Set up mock CRPT routes."""
        router = APIRouter(prefix=API_PREFIX)

        @router.get("/auth/cert/key")
        async def auth_key():
            """Issue a challenge to be signed."""
            challenge_id = str(uuid.uuid4())
            data = uuid.uuid4().hex
            self.challenges[challenge_id] = data
            return {"uuid": challenge_id, "data": data}

        @router.post("/auth/cert/")
        async def auth_cert(request: Request):
            """Exchange a signed challenge for a bearer token."""
            try:
                payload = await request.json()
            except ValueError:
                payload = None
            if not isinstance(payload, dict):
                return _error(400, "Malformed authentication request", code="400", description="Body must be a JSON object")

            challenge_id = payload.get("uuid")
            signed = payload.get("data")
            if challenge_id not in self.challenges:
                return _error(403, "Unknown challenge", code="403", description="uuid was not issued or already used")
            if not signed:
                return _error(403, "Signature is empty", code="403", description="data must contain the signed challenge")

            del self.challenges[challenge_id]
            token = uuid.uuid4().hex
            self.tokens.append(token)
            self.logger.info("Issued mock token", challenge_id=challenge_id)
            return {"token": token}

        @router.post("/lk/documents/create")
        async def create_document(
            request: Request,
            pg: str = Query(...),
            authorization: Optional[str] = Header(None)
        ):
            """Accept a document for processing."""
            if not authorization or not authorization.startswith("Bearer "):
                return _error(401, "Bearer token is required")
            if authorization.split(" ", 1)[1] not in self.tokens:
                return _error(401, "Token is invalid or expired")

            if self._forced_failure is not None:
                status_code, message = self._forced_failure
                self._forced_failure = None
                if message is None:
                    return Response(status_code=status_code)
                return _error(status_code, message)

            try:
                payload = await request.json()
            except ValueError:
                return _error(400, "Malformed document request")
            missing = [name for name in DOCUMENT_FIELDS if not isinstance(payload, dict) or name not in payload]
            if missing:
                return _error(400, f"Missing fields: {', '.join(missing)}")
            if payload["product_group"] != pg:
                return _error(400, "Product group does not match pg parameter")
            try:
                base64.b64decode(payload["product_document"], validate=True)
            except (binascii.Error, ValueError):
                return _error(400, "product_document must be base64")

            document_id = str(uuid.uuid4())
            self.documents.append({"document_id": document_id, **payload})
            return {"document_id": document_id, "status": "IN_PROGRESS"}

        self.app.include_router(router)


def create_app():
    """Create mock CRPT application."""
    server = MockCrptServer()
    return server.app


if __name__ == "__main__":
    import uvicorn

    configure_logging("mock-crpt", get_settings().log_level)
    uvicorn.run(create_app(), host="0.0.0.0", port=8090)

"""
Certificate-based authentication for the CRPT API.
"""

import inspect
from typing import Awaitable, Callable, Optional, Union

import httpx

from shared.logging import get_logger
from shared.metrics import ClientMetrics
from shared.errors import ApiError, CrptClientException
from ..adapters.request_executor import RequestExecutor
from ..domain.models import AuthKeyResponse, AuthRequest, AuthResponse

AUTH_CERT_KEY_ENDPOINT = "/auth/cert/key"
AUTH_CERT_ENDPOINT = "/auth/cert/"

CONTENT_TYPE = "application/json"

# Signs the challenge with the caller's qualified electronic signature.
CertificateSigner = Callable[[str], Union[str, Awaitable[str]]]


class AuthSession:
    """Holds the bearer token obtained through the two-step certificate handshake."""

    def __init__(self, executor: RequestExecutor, base_url: str, metrics: Optional[ClientMetrics] = None):
        self.executor = executor
        self.base_url = base_url.rstrip("/")
        self.metrics = metrics
        self.logger = get_logger("crpt.auth")
        self._token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    async def authenticate(self, signer: CertificateSigner) -> str:
        """Run the key/sign/exchange handshake and cache the resulting token.

        The stored token is replaced only when the whole handshake succeeds.
        """
        try:
            token = await self._handshake(signer)
        except CrptClientException as e:
            self._count("failure")
            self.logger.warning("Certificate authentication failed", code=e.code, error=e.message)
            raise
        except Exception as e:
            # Raised by the caller's signer
            self._count("failure")
            self.logger.error(
                "Certificate authentication failed",
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        self._token = token
        self._count("success")
        self.logger.info("Certificate authentication succeeded")
        return token

    async def _handshake(self, signer: CertificateSigner) -> str:
        key_request = httpx.Request("GET", f"{self.base_url}{AUTH_CERT_KEY_ENDPOINT}")
        key = await self.executor.execute(key_request, AuthKeyResponse)

        signed = signer(key.data)
        if inspect.isawaitable(signed):
            signed = await signed

        auth_request = httpx.Request(
            "POST",
            f"{self.base_url}{AUTH_CERT_ENDPOINT}",
            headers={"Content-Type": CONTENT_TYPE},
            content=AuthRequest(uuid=key.uuid, data=signed).to_json().encode("utf-8")
        )
        status_code, result = await self.executor.execute_with_status(auth_request, AuthResponse)

        if not result.token:
            raise ApiError(
                status_code,
                result.error_message or result.description or "Authentication response did not contain a token",
                details={"code": result.code, "description": result.description}
            )
        return result.token

    def _count(self, status: str):
        if self.metrics is not None:
            self.metrics.increment_counter("crpt_authentications_total", status=status)

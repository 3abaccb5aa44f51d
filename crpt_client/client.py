"""
Rate-limited, authenticated client for the CRPT document API.
"""

import base64
from datetime import timedelta
from typing import Optional, Union

import httpx

from shared.config import ClientSettings, get_settings
from shared.logging import get_logger, request_context
from shared.metrics import ClientMetrics
from shared.errors import (
    ClientClosedError,
    ConfigurationError,
    CrptClientException,
    NotAuthenticatedError,
    RateLimitExceededError,
)
from .adapters.request_executor import RequestExecutor
from .auth.session import AuthSession, CertificateSigner, CONTENT_TYPE
from .domain.catalog import Environment, DocumentFormat, DocumentType, ProductGroup
from .domain.models import CreateDocumentRequest, CreateDocumentResponse, Document, encode_document
from .ratelimit.permit_pool import PermitPool, PermitReplenisher

CREATE_DOCUMENT_ENDPOINT = "/lk/documents/create"


class DocumentClient:
    """Client for creating documents in the CRPT marking system.

    At most ``request_limit`` submissions are admitted per ``period``; the
    budget is refilled by a background task. The task starts with
    :meth:`start`, on entering ``async with``, or on the first
    :meth:`authenticate` or :meth:`submit` call, and runs until shutdown.
    A client that never touched an event loop keeps its initial budget.
    Submissions need a bearer token, obtained with :meth:`authenticate`.

    Usage::

        async with DocumentClient(timedelta(minutes=1), 5) as client:
            await client.authenticate(sign_with_certificate)
            await client.submit_introduce_goods(document, signature, ProductGroup.MILK)
    """

    def __init__(
        self,
        period: Union[timedelta, float, None] = None,
        request_limit: Optional[int] = None,
        environment: Union[Environment, str, None] = None,
        *,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[ClientMetrics] = None,
    ):
        self.settings = settings or get_settings()
        self.logger = get_logger("crpt.client")

        window_seconds = self._window_seconds(period if period is not None else self.settings.window_seconds)
        capacity = request_limit if request_limit is not None else self.settings.request_limit
        self.permits = PermitPool(capacity, window_seconds)
        self.replenisher = PermitReplenisher(self.permits)

        selected = environment or self.settings.environment
        try:
            self.environment = Environment(selected.lower() if isinstance(selected, str) else selected)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown environment: {selected}",
                details={"allowed": [env.value for env in Environment]}
            ) from e
        self.base_url = self.environment.base_url(self.settings)

        self.metrics = metrics or ClientMetrics()
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.http_timeout_seconds),
            headers={"User-Agent": self.settings.user_agent}
        )
        self.executor = RequestExecutor(self.http_client, self.metrics)
        self.session = AuthSession(self.executor, self.base_url, self.metrics)
        self._closed = False
        self.metrics.get_metric("crpt_permits_available").set_function(lambda: self.permits.available)

    @staticmethod
    def _window_seconds(period: Union[timedelta, float]) -> float:
        if isinstance(period, timedelta):
            return period.total_seconds()
        if isinstance(period, bool) or not isinstance(period, (int, float)):
            raise ConfigurationError(
                "Rate limit period must be a timedelta or a number of seconds",
                details={"period": repr(period)}
            )
        return float(period)

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        """Start refilling the permit pool every window; a no-op once running."""
        if self._closed:
            raise ClientClosedError()
        self.replenisher.start()

    async def shutdown(self) -> None:
        """Stop the replenisher. In-flight requests are left to complete."""
        self._closed = True
        await self.replenisher.stop()

    async def aclose(self) -> None:
        """Shut down and close the HTTP client if this instance created it."""
        await self.shutdown()
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "DocumentClient":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def authenticate(self, signer: CertificateSigner) -> str:
        """Obtain and cache a bearer token; see :meth:`AuthSession.authenticate`."""
        self.start()
        return await self.session.authenticate(signer)

    async def submit(
        self,
        document_format: Union[DocumentFormat, str],
        product_document: Union[str, bytes],
        signature: str,
        document_type: Union[DocumentType, str],
        product_group: Union[ProductGroup, str],
    ) -> CreateDocumentResponse:
        """Create a document through the unified creation endpoint.

        ``product_document`` is either base64 text, sent as is, or raw bytes,
        which are base64-encoded here. The permit taken for the call is
        returned on every exit path, including cancellation.

        Raises:
            ClientClosedError: the client was shut down.
            NotAuthenticatedError: :meth:`authenticate` has not succeeded yet.
            RateLimitExceededError: the current window is used up.
            TransportError, ApiError, DeserializationError: see RequestExecutor.
        """
        self.start()

        document_format = DocumentFormat(document_format)
        document_type = DocumentType(document_type)
        product_group = ProductGroup(product_group)
        if isinstance(product_document, (bytes, bytearray)):
            product_document = base64.b64encode(product_document).decode("ascii")

        with request_context():
            token = self.session.token
            if not token:
                self.metrics.increment_counter("crpt_submissions_total", outcome="not_authenticated")
                raise NotAuthenticatedError()

            if not self.permits.try_acquire():
                self.metrics.increment_counter("crpt_rate_limit_rejections_total")
                self.metrics.increment_counter("crpt_submissions_total", outcome="rate_limited")
                self.logger.warning(
                    "Submission rejected by rate limit",
                    capacity=self.permits.capacity,
                    window_seconds=self.permits.window_seconds
                )
                raise RateLimitExceededError(
                    details={
                        "capacity": self.permits.capacity,
                        "window_seconds": self.permits.window_seconds
                    }
                )

            try:
                request = self._build_submission_request(
                    token, document_format, product_document, signature, document_type, product_group
                )
                result = await self.executor.execute(request, CreateDocumentResponse)
            except CrptClientException as e:
                self.metrics.increment_counter("crpt_submissions_total", outcome=e.code.lower())
                self.logger.error(
                    "Document submission failed",
                    document_type=document_type.value,
                    product_group=product_group.value,
                    code=e.code,
                    error=e.message
                )
                raise
            finally:
                self.permits.release()

            self.metrics.increment_counter("crpt_submissions_total", outcome="success")
            self.logger.info(
                "Document submitted",
                document_type=document_type.value,
                product_group=product_group.value,
                document_id=result.document_id,
                status=result.status
            )
            return result

    async def submit_introduce_goods(
        self,
        document: Document,
        signature: str,
        product_group: Union[ProductGroup, str],
    ) -> CreateDocumentResponse:
        """Submit an introduce-goods document, serialized as base64 JSON."""
        return await self.submit(
            DocumentFormat.MANUAL,
            encode_document(document),
            signature,
            DocumentType.LP_INTRODUCE_GOODS,
            product_group
        )

    def _build_submission_request(
        self,
        token: str,
        document_format: DocumentFormat,
        product_document: str,
        signature: str,
        document_type: DocumentType,
        product_group: ProductGroup,
    ) -> httpx.Request:
        body = CreateDocumentRequest(
            document_format=document_format.value,
            product_document=product_document,
            product_group=product_group.value,
            signature=signature,
            type=document_type.value
        )
        return httpx.Request(
            "POST",
            f"{self.base_url}{CREATE_DOCUMENT_ENDPOINT}",
            params={"pg": product_group.value},
            headers={
                "Content-Type": CONTENT_TYPE,
                "Authorization": f"Bearer {token}"
            },
            content=body.to_json().encode("utf-8")
        )

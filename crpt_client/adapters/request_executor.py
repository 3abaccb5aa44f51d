"""
Request execution and response classification for the CRPT API.
"""

from contextlib import nullcontext
from typing import Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from shared.logging import get_logger
from shared.metrics import ClientMetrics
from shared.errors import ApiError, TransportError, DeserializationError
from ..domain.models import ApiErrorBody

T = TypeVar("T", bound=BaseModel)

NO_CONTENT_MESSAGE = "API returned an error with no content"


class RequestExecutor:
    """Sends prepared requests and turns responses into models or typed errors.

    Holds no per-call state; one instance is shared by all concurrent callers
    of a client.
    """

    def __init__(self, http_client: httpx.AsyncClient, metrics: Optional[ClientMetrics] = None):
        self.http_client = http_client
        self.metrics = metrics
        self.logger = get_logger("crpt.executor")

    async def execute(self, request: httpx.Request, response_model: Type[T]) -> T:
        """Send ``request`` and parse a successful body into ``response_model``.

        Raises:
            TransportError: the service could not be reached.
            ApiError: the service answered with status >= 400.
            DeserializationError: a successful body did not match the model.
        """
        _, result = await self.execute_with_status(request, response_model)
        return result

    async def execute_with_status(self, request: httpx.Request, response_model: Type[T]) -> Tuple[int, T]:
        """Same as :meth:`execute`, also returning the response status code."""
        endpoint = request.url.path
        try:
            with self._timed(endpoint):
                response = await self.http_client.send(request)
        except httpx.RequestError as e:
            self._count(endpoint, "transport_error")
            self.logger.error(
                "CRPT API transport error",
                method=request.method,
                endpoint=endpoint,
                error=str(e),
                error_type=type(e).__name__
            )
            raise TransportError(
                f"Error reaching CRPT API: {e}",
                details={"endpoint": endpoint, "error_type": type(e).__name__}
            ) from e

        self._count(endpoint, response.status_code)

        if response.status_code >= 400:
            message = self._error_message(response)
            self.logger.warning(
                "CRPT API returned an error",
                method=request.method,
                endpoint=endpoint,
                status_code=response.status_code,
                error_message=message
            )
            raise ApiError(response.status_code, message, details={"endpoint": endpoint})

        try:
            return response.status_code, response_model.model_validate_json(response.content)
        except ValidationError as e:
            self.logger.error(
                "Unexpected CRPT API response body",
                endpoint=endpoint,
                model=response_model.__name__,
                error_count=e.error_count()
            )
            raise DeserializationError(
                f"Response from {endpoint} does not match {response_model.__name__}",
                details={"endpoint": endpoint, "errors": e.errors(include_url=False, include_input=False)}
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the server-supplied message from an error body."""
        if not response.content or not response.content.strip():
            return NO_CONTENT_MESSAGE
        try:
            body = ApiErrorBody.model_validate_json(response.content)
        except ValidationError:
            return NO_CONTENT_MESSAGE
        return body.error_message or body.description or NO_CONTENT_MESSAGE

    def _timed(self, endpoint: str):
        if self.metrics is None:
            return nullcontext()
        return self.metrics.time_operation("crpt_request_duration_seconds", endpoint=endpoint)

    def _count(self, endpoint: str, status_code):
        if self.metrics is not None:
            self.metrics.increment_counter("crpt_requests_total", endpoint=endpoint, status_code=status_code)

"""Rendering Host Client"""

import httpx
import pybreaker

from ..core import get_logger, get_settings
from ..core.exceptions import HostError
from ..core.json import JSONParseError, dumps_bytes
from ..models.blocks import GridDescription
from ..models.results import UIResults

logger = get_logger(__name__)


class BreakerListener(pybreaker.CircuitBreakerListener):
    """Listener for circuit breaker state changes."""

    def state_change(self, cb, old_state, new_state):
        """Called when circuit breaker state changes."""
        logger.warning(
            "breaker_state_change",
            breaker=cb.name,
            from_state=str(old_state),
            to_state=str(new_state),
        )


class HttpHost:
    """
    Rendering host reached over HTTP, with circuit breaker protection.

    Dialogs are posted to ``/dialogs``; the response body is the result
    payload of the round. Progress text is posted to ``/progress``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        fail_max: int | None = None,
        reset_timeout: int | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the host client with a circuit breaker.

        Args:
            base_url: Base URL of the host (defaults from settings)
            timeout: Request timeout in seconds; covers the user's think time
            fail_max: Consecutive failures before the breaker opens
            reset_timeout: Seconds the breaker stays open
            client: Preconfigured httpx client (tests, custom transports)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.host_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.host_timeout
        self._client = client or httpx.Client(timeout=self.timeout)

        self._breaker = pybreaker.CircuitBreaker(
            fail_max=fail_max if fail_max is not None else settings.breaker_fail_max,
            reset_timeout=(
                reset_timeout if reset_timeout is not None else settings.breaker_reset_timeout
            ),
            name="host-http",
            listeners=[BreakerListener()],
        )

        logger.info("client_init", url=self.base_url)

    @property
    def breaker_state(self) -> str:
        return self._breaker.current_state

    def _post(self, path: str, body: bytes, content_type: str) -> httpx.Response:
        url = f"{self.base_url}{path}"

        def _make_request() -> httpx.Response:
            response = self._client.post(url, content=body, headers={"Content-Type": content_type})
            response.raise_for_status()
            return response

        try:
            return self._breaker.call(_make_request)
        except pybreaker.CircuitBreakerError as e:
            logger.error("host_request_failed", path=path, error="Circuit breaker open")
            raise HostError("Circuit breaker open - host unavailable") from e
        except httpx.HTTPStatusError as e:
            logger.warning("host_http_status", path=path, status=e.response.status_code)
            raise HostError(f"Host answered {e.response.status_code} for {path}") from e
        except httpx.HTTPError as e:
            logger.warning("host_http_error", path=path, error=str(e))
            raise HostError(f"Host request to {path} failed: {e}") from e

    def show_ui(self, description: GridDescription) -> UIResults | None:
        """
        Render a dialog and, when required, wait for the user's answer.

        Raises:
            HostError: On transport errors, non-2xx answers or an open breaker
            ResultPayloadError: If the answer is not a valid result payload
        """
        try:
            body = dumps_bytes(description.model_dump(mode="json"))
        except JSONParseError as e:
            raise HostError(f"Cannot encode dialog: {e}") from e

        response = self._post("/dialogs", body, "application/json")
        logger.info("host_request", path="/dialogs", blocks=len(description.blocks))

        if not description.require_response:
            return None
        return UIResults.from_json(response.content)

    def show_progress(self, text: str) -> None:
        self._post("/progress", text.encode("utf-8"), "text/plain; charset=utf-8")

    def health_check(self) -> bool:
        """
        Check if the host is reachable (bypasses circuit breaker).

        Returns:
            True if the host is healthy
        """
        try:
            # Health checks bypass circuit breaker to test actual connectivity
            response = self._client.get(f"{self.base_url}/health", timeout=2.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def close(self) -> None:
        """Close HTTP client"""
        self._client.close()

    def __enter__(self) -> "HttpHost":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

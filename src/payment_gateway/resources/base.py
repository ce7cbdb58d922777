"""
Base resource class for the Payment Gateway SDK.

Every resource method goes through :meth:`BaseResource._call`, which builds
the headers, sends one request, parses the body and turns failures into the
resource's domain exception. Gateway error responses are translated in this
order:

1. the operation's own rules (status plus optional body substring)
2. the operation's "not found" result, for 404s
3. the resource's status table
4. the resource's default message
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence, Type, TypeVar
from urllib.parse import quote

import httpx

from ..models.base import GatewayModel
from ..models.errors import APIError, PaymentException, PaymentGatewayError

if TYPE_CHECKING:
    from ..client import PaymentGatewayClient

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=GatewayModel)

# Sentinel: no operation-level result for 404, fall through to the tables
_RAISE = object()


@dataclass(frozen=True)
class ErrorRule:
    """Map a gateway error status (and optional body substring) to a message.

    ``message`` is a format string; ``{body}`` is the raw response body and
    any other field comes from the call's context (``{id}``, ``{no}``, ...).
    """

    status: int
    message: str
    contains: Optional[str] = None

    def matches(self, error: APIError) -> bool:
        if error.status_code != self.status:
            return False
        return self.contains is None or self.contains in (error.response_body or "")


DEFAULT_STATUS_MESSAGES: Mapping[int, str] = {
    400: "Invalid request data: {body}",
    401: "Authentication failed - check API credentials",
    403: "Access denied - insufficient permissions",
    404: "Resource not found",
    409: "Resource conflict: {body}",
    422: "Validation failed: {body}",
    500: "Server error occurred",
    503: "Service temporarily unavailable",
}


def parse_model(model: Type[T]) -> Callable[[Any], T]:
    """Parser for a single-object response."""

    def parse(data: Any) -> T:
        return model.model_validate(data)

    return parse


def parse_list(model: Type[T]) -> Callable[[Any], list[T]]:
    """Parser for a collection response; an empty body is an empty list."""

    def parse(data: Any) -> list[T]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        return [model.model_validate(item) for item in data]

    return parse


def parse_bool(data: Any) -> bool:
    return data is True


class BaseResource:
    """Base class for API resources.

    Subclasses set ``path`` and the error attributes; each public method is
    one call to :meth:`_call`.
    """

    path: str = ""
    error_class: Type[PaymentGatewayError] = PaymentException
    error_code: str = "ERROR"
    status_messages: Mapping[int, str] = DEFAULT_STATUS_MESSAGES
    default_message: str = "{action}: {body}"
    sends_default_client_id: bool = True

    def __init__(self, client: "PaymentGatewayClient") -> None:
        self._client = client

    def _url(self, *segments: Any) -> str:
        parts = [self.path] + [quote(str(segment), safe="") for segment in segments]
        return self._client._url("/".join(parts))

    def _error(self, message: str, cause: Optional[APIError] = None) -> PaymentGatewayError:
        return self.error_class(
            message,
            code=self.error_code,
            status_code=cause.status_code if cause else None,
            response_body=cause.response_body if cause else None,
        )

    def _call(
        self,
        method: str,
        *segments: Any,
        action: str,
        parse: Optional[Callable[[Any], Any]] = None,
        body: Any = None,
        client_id: Any = None,
        tenant_id: Any = None,
        require_client: bool = False,
        rules: Sequence[ErrorRule] = (),
        translate: bool = True,
        not_found: Any = _RAISE,
        **context: Any,
    ) -> Any:
        """Perform one gateway call.

        Args:
            method: HTTP method
            segments: Path segments appended to the resource path
            action: Failure prefix, e.g. "Failed to create account"
            parse: Converts the decoded body into the return value
            body: Request model or JSON-ready payload
            client_id: Per-call X-CLIENT-ID
            tenant_id: X-TENANT-ID
            require_client: Fail with ValueError when no client id is known
            rules: Operation rules, first match wins
            translate: When false, any failure reads "{action}: {error}"
            not_found: Value returned on 404 when no rule matched
            context: Extra fields for rule messages

        Raises:
            ValueError: ``require_client`` is set and no client id is available
            PaymentGatewayError: The resource's domain exception
        """
        if require_client and client_id is None and self._client.settings.client_id is None:
            raise ValueError(f"{action}: client_id is required")

        headers = self._client._build_headers(
            client_id=client_id,
            tenant_id=tenant_id,
            include_default_client=self.sends_default_client_id,
        )
        payload = body.to_dict() if isinstance(body, GatewayModel) else body
        url = self._url(*segments)

        try:
            data = self._client._request(method, url, headers=headers, json=payload)
            return parse(data) if parse else data
        except APIError as err:
            if not translate:
                logger.error("%s: %s", action, err)
                raise self._error(f"{action}: {err}", err) from err
            result = self._translate(err, action, rules, not_found, context)
            if isinstance(result, PaymentGatewayError):
                raise result from err
            return result
        except (httpx.HTTPError, ValueError) as err:
            logger.error("%s: %s", action, err)
            raise self._error(f"{action}: {err}") from err

    def _translate(
        self,
        err: APIError,
        action: str,
        rules: Sequence[ErrorRule],
        not_found: Any,
        context: Mapping[str, Any],
    ) -> Any:
        fields = dict(context, action=action, body=err.response_body or "")

        for rule in rules:
            if rule.matches(err):
                return self._error(rule.message.format(**fields), err)

        if not_found is not _RAISE and err.status_code == 404:
            logger.debug("%s: not found, returning %r", action, not_found)
            return not_found

        template = self.status_messages.get(err.status_code, self.default_message)
        return self._error(template.format(**fields), err)

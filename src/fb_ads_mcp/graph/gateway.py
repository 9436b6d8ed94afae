"""Single async chokepoint for every Graph API request."""

from __future__ import annotations

import json
import os
from typing import Any, Mapping

import httpx

from ..config import FbAdsMcpSettings, get_settings
from ..errors import GraphApiError, GuardrailViolation, McpErrorCode, TransportError
from ..logging import get_logger

logger = get_logger(__name__)

PRODUCTION_DOMAIN = "facebook.com"
RATE_LIMIT_CODES = frozenset({4, 17, 32, 613})


class GraphGateway:
    """Builds Graph API URLs, injects the credential and maps vendor errors.

    Host, video host, version and credential are copied from settings at
    construction. The ``set_*`` methods exist for tests; the production path
    never calls them.
    """

    def __init__(
        self,
        settings: FbAdsMcpSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._host = self.settings.graph_api_base_url.rstrip("/")
        self._video_host = self.settings.graph_video_base_url.rstrip("/")
        self._version = self.settings.graph_api_version
        self._access_token = (
            self.settings.access_token.get_secret_value() if self.settings.access_token else None
        )
        self._client = client or self._new_client()

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.default_timeout_seconds),
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        """The HTTP client, reopened if a previous session closed it."""

        if self._client.is_closed:
            self._client = self._new_client()
        return self._client

    async def __aenter__(self) -> "GraphGateway":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    @property
    def host(self) -> str:
        return self._host

    @property
    def video_host(self) -> str:
        return self._video_host

    @property
    def version(self) -> str:
        return self._version

    def set_host(self, host: str) -> None:
        self._host = host.rstrip("/")

    def set_video_host(self, host: str) -> None:
        self._video_host = host.rstrip("/")

    def set_version(self, version: str) -> None:
        self._version = version

    def set_access_token(self, token: str | None) -> None:
        self._access_token = token

    def url(self, path: str, *, video: bool = False) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        host = self._video_host if video else self._host
        return f"{host}/{self._version}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        video: bool = False,
    ) -> httpx.Response:
        """Issue one request and return the response, raising on status >= 400.

        The credential travels in the form when ``form`` is given (batch and
        upload calls) and in the query string otherwise.
        """

        if body is not None and (form is not None or files is not None):
            raise ValueError("Cannot send both JSON and form data in the same request")

        token = self._require_token()
        url = self.url(path, video=video)
        self._check_guardrail(url)

        params = {key: value for key, value in (query or {}).items() if value is not None}
        data = None
        if form is not None:
            data = {key: str(value) for key, value in form.items() if value is not None}
            data["access_token"] = token
        else:
            params["access_token"] = token

        if self.settings.enable_request_logging:
            logger.info(
                "graph_request",
                method=method,
                url=url,
                query=self._redact(params),
                form=self._redact(data) if data else None,
            )

        try:
            response = await self.client.request(
                method=method,
                url=url,
                params=params,
                json=body,
                data=data,
                files=files,
            )
            await response.aread()
        except httpx.RequestError as exc:
            logger.warning("graph_transport_error", method=method, url=url, error=str(exc))
            raise TransportError(
                "HTTP request failed",
                details={"error": str(exc), "path": path},
            ) from exc

        if response.status_code >= 400:
            error = self._map_error(response)
            logger.warning(
                "graph_api_error",
                method=method,
                path=path,
                http_status=response.status_code,
                code=error.code,
                error_subcode=error.error_subcode,
                fbtrace_id=error.fbtrace_id,
            )
            raise error
        return response

    async def call(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> str:
        """Perform a call and return the raw response body untouched."""

        response = await self.request(method, path, query=query, body=body)
        return response.text

    async def call_json(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        video: bool = False,
    ) -> Any:
        response = await self.request(
            method,
            path,
            query=query,
            body=body,
            form=form,
            files=files,
            video=video,
        )
        return decode_json(response)

    def _require_token(self) -> str:
        if not self._access_token:
            raise TransportError("Missing Facebook access token; set FACEBOOK_ACCESS_TOKEN")
        return self._access_token

    def _check_guardrail(self, url: str) -> None:
        if os.environ.get("TESTING") != "true":
            return
        host = httpx.URL(url).host
        if host == PRODUCTION_DOMAIN or host.endswith(f".{PRODUCTION_DOMAIN}"):
            logger.critical("production_call_blocked", url=url)
            raise GuardrailViolation(url)

    def _redact(self, values: Mapping[str, Any]) -> dict[str, Any]:
        keys = {key.lower() for key in self.settings.pii_redaction_keys}
        return {key: "***" if key.lower() in keys else value for key, value in values.items()}

    def _map_error(self, response: httpx.Response) -> GraphApiError:
        try:
            payload = response.json()
        except ValueError:
            payload = {"error": {"message": response.text or f"HTTP {response.status_code} error"}}
        if not isinstance(payload, dict):
            payload = {}

        err = payload.get("error")
        if not isinstance(err, dict):
            err = {"message": response.text or f"HTTP {response.status_code} error"}

        code = _as_int(err.get("code"))
        retry_after = None
        if "Retry-After" in response.headers:
            try:
                retry_after = float(response.headers["Retry-After"])
            except ValueError:
                retry_after = None

        error_data = err.get("error_data")
        if isinstance(error_data, str):
            try:
                error_data = json.loads(error_data)
            except ValueError:
                pass

        return GraphApiError(
            message=err.get("message") or "Unknown error",
            http_status=response.status_code,
            type=err.get("type"),
            code=code,
            error_subcode=_as_int(err.get("error_subcode")),
            fbtrace_id=err.get("fbtrace_id"),
            is_transient=bool(err.get("is_transient", False)),
            error_data=error_data,
            category=classify_error(response.status_code, code),
            retry_after=retry_after,
        )


def classify_error(status: int, code: int | None) -> McpErrorCode:
    if status == 401 or code == 190:
        return McpErrorCode.AUTH
    if status == 403 or code == 10 or (code is not None and 200 <= code <= 299):
        return McpErrorCode.PERMISSION
    if status == 429 or code in RATE_LIMIT_CODES or (code is not None and 80000 <= code <= 80014):
        return McpErrorCode.RATE_LIMIT
    if status == 404:
        return McpErrorCode.NOT_FOUND
    if status == 409:
        return McpErrorCode.CONFLICT
    if 500 <= status < 600:
        return McpErrorCode.REMOTE_5XX
    return McpErrorCode.VALIDATION


def decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise TransportError(
            "Failed to decode Graph API response",
            details={"status": response.status_code, "body": response.text[:500]},
        ) from exc


def _as_int(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


__all__ = ["GraphGateway", "PRODUCTION_DOMAIN", "classify_error", "decode_json"]

"""
HTTP access to the console REST API.

ApiClient owns one httpx.Client (base URL, timeout, bearer token) and turns
every failure into ApiError. HttpResourceApi binds a ResourceSchema's paths
to the ResourceApi contract.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path
import logging
import mimetypes

import httpx

from academic_console.forms.field_codec import WirePayload
from academic_console.forms.field_schema import ResourceSchema
from academic_console.protocols import ResourceApi, get_console_config

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Failure of an API call.

    Attributes:
        message: Transport-level description (connection error text or status line)
        status: HTTP status code, None for transport failures
        payload: Decoded JSON body of an error response, if any
    """

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, message={self.message!r})"


class ApiClient:
    """
    Thin synchronous wrapper over httpx.Client.

    Usage:
        with ApiClient() as client:
            body = client.get("/config/departments", params={"page": 1, "limit": 10})
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        config = get_console_config()
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        headers = {"Accept": "application/json"}
        token = token if token is not None else config.auth_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else config.request_timeout,
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # --- Requests -------------------------------------------------------

    def request(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and return the decoded body, raising ApiError on any failure."""
        logger.debug(f"{method} {path} params={kwargs.get('params')}")
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise ApiError(str(e) or e.__class__.__name__) from e

        body = self._decode(response)
        if response.is_error:
            if response.status_code == 401:
                logger.warning(f"{method} {path} unauthorized; check the configured token")
            raise ApiError(
                f"Request failed with status code {response.status_code}",
                status=response.status_code,
                payload=body,
            )
        return body

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return {"message": response.text}

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def send_payload(self, method: str, path: str, payload: WirePayload) -> Any:
        """POST/PUT a WirePayload as JSON or multipart form data."""
        if not payload.multipart:
            return self.request(method, path, json=payload.fields)

        if payload.attachment is None:
            # Filename-less parts keep the body multipart even without an upload
            parts = {name: (None, str(value)) for name, value in payload.fields.items()}
            return self.request(method, path, files=parts)

        attachment_path = Path(payload.attachment.path)
        mime_type = mimetypes.guess_type(attachment_path.name)[0] or "application/octet-stream"
        with attachment_path.open("rb") as handle:
            files = {payload.attachment.field_name: (attachment_path.name, handle, mime_type)}
            return self.request(method, path, data=payload.fields, files=files)


class HttpResourceApi(ResourceApi):
    """ResourceApi over HTTP for one schema's endpoints."""

    def __init__(self, client: ApiClient, schema: ResourceSchema):
        self._client = client
        self._schema = schema

    @property
    def endpoint(self) -> str:
        return self._schema.endpoint

    def list(self, page: int, limit: int, search: str = "",
             filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        for key, value in (filters or {}).items():
            if value not in (None, ""):
                params[key] = value
        return self._client.get(self.endpoint, params=params) or {}

    def list_scoped(self, parent_id: Any) -> Dict[str, Any]:
        scope = self._schema.scope
        if scope is None or not scope.scoped_path:
            raise ApiError(f"{self._schema.key} has no scoped listing")
        return self._client.get(f"{scope.scoped_path}/{parent_id}") or {}

    def create(self, payload: WirePayload) -> Any:
        return self._client.send_payload("POST", self.endpoint, payload)

    def update(self, resource_id: Any, payload: WirePayload) -> Any:
        return self._client.send_payload("PUT", f"{self.endpoint}/{resource_id}", payload)

    def remove(self, resource_id: Any) -> Any:
        return self._client.delete(f"{self.endpoint}/{resource_id}")

    def options(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        body = self._client.get(path, params=params) or {}
        if isinstance(body, list):
            return body
        return list(body.get("data") or [])

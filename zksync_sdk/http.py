"""JSON-RPC transport used by the zkSync SDK."""
from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, MutableMapping, Optional

import requests

from .errors import ZkSyncSDKError

logger = logging.getLogger(__name__)

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]


@dataclass
class RpcClient:
    """Small JSON-RPC 2.0 client on top of :mod:`requests` with SDK defaults."""

    url: str
    requestor: Optional[HttpRequestor] = None
    user_agent: str = "python-zksync-sdk/0.1"
    timeout: float = 30.0
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), init=False, repr=False)
    _id_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.requestor is None:
            session = requests.Session()

            def _requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
                return session.request(url=url, **dict(kwargs))

            self.requestor = _requestor

    def _next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    def call(self, method: str, *params: Any, timeout: Optional[float] = None) -> Any:
        """Send ``method`` with positional ``params`` and return the ``result`` member.

        ``timeout`` overrides the client default for this request only, which
        lets callers bound a request by their own deadline.
        """

        if timeout is not None and timeout <= 0:
            raise ZkSyncSDKError.transport_error(
                self.url, method, TimeoutError("deadline exceeded before the request was sent")
            )

        request_id = self._next_id()
        headers: MutableMapping[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        kwargs: MutableMapping[str, Any] = {
            "method": "POST",
            "headers": headers,
            "timeout": self.timeout if timeout is None else timeout,
            "json": {
                "jsonrpc": "2.0",
                "id": request_id,
                "method": method,
                "params": list(params),
            },
        }

        logger.debug("rpc call %s (id=%d)", method, request_id)

        assert self.requestor is not None
        try:
            response = self.requestor(self.url, kwargs)
        except requests.RequestException as exc:
            raise ZkSyncSDKError.transport_error(self.url, method, exc) from exc

        if not response.ok:
            try:
                body: Any = response.json()
            except ValueError:
                body = response.text
            raise ZkSyncSDKError.from_http_response(self.url, method, response.status_code, body)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ZkSyncSDKError.invalid_response_error(method, response.text) from exc

        if not isinstance(payload, Mapping):
            raise ZkSyncSDKError.invalid_response_error(method, payload)

        error = payload.get("error")
        if error is not None:
            raise ZkSyncSDKError.from_rpc_error(method, error)

        if "result" not in payload:
            raise ZkSyncSDKError.invalid_response_error(method, payload)

        return payload["result"]

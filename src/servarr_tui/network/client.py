"""HTTP worker for the Servarr v3 APIs.

Requests are resolved into RequestProps on the event-loop thread and queued
here; one daemon thread executes them in submission order and hands each
outcome to ``sink``. The sink is the only way results leave this module; it
must not touch UI state itself (the app's sink posts a Textual message).

// [LAW:single-enforcer] All HTTP I/O happens in Network.execute.
// [LAW:dataflow-not-control-flow] Every request yields exactly one value,
//   NetworkResult or NetworkError. Nothing raises out of the worker.
"""

from __future__ import annotations

import json
import logging
import queue
import ssl
import threading
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from servarr_tui.settings import ServerConfig

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v3"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class RequestProps:
    event: Enum
    server: ServerConfig
    method: str
    path: str
    query: dict[str, object] = field(default_factory=dict)
    body: object = None

    @property
    def url(self) -> str:
        url = f"{self.server.base_url}{API_PREFIX}{self.path}"
        if self.query:
            url += "?" + urllib.parse.urlencode(
                {k: _query_value(v) for k, v in self.query.items()}
            )
        return url


def _query_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class NetworkResult:
    event: Enum
    payload: object


@dataclass(frozen=True)
class NetworkError:
    event: Enum
    message: str
    status: int | None = None
    body: str = ""


NetworkOutcome = NetworkResult | NetworkError


def _collapse(body: str) -> str:
    return " ".join(body.split())


class Network:
    def __init__(self, sink: Callable[[NetworkOutcome], None], timeout: float = DEFAULT_TIMEOUT):
        self._sink = sink
        self._timeout = timeout
        self._queue: queue.Queue[RequestProps | None] = queue.Queue()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="servarr-network", daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        """Ask the worker to exit after the request in flight. Queued requests are dropped."""
        if self._thread is None:
            return
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
        self._queue.put(None)
        self._thread.join(timeout=timeout)
        self._thread = None

    def submit(self, props: RequestProps) -> None:
        self.start()
        self._queue.put(props)

    def _run(self) -> None:
        while True:
            props = self._queue.get()
            if props is None:
                return
            self._sink(self.execute(props))

    def execute(self, props: RequestProps) -> NetworkOutcome:
        """Run one request synchronously."""
        url = props.url
        data = json.dumps(props.body).encode() if props.body is not None else None
        headers = {
            "X-Api-Key": props.server.api_token,
            "Accept": "application/json",
        }
        if data is not None:
            headers["Content-Type"] = "application/json"
        req = urllib.request.Request(url, data=data, headers=headers, method=props.method)
        logger.debug("%s %s (%s)", props.method, url, props.event.name)

        context = ssl.create_default_context() if url.startswith("https") else None
        try:
            with urllib.request.urlopen(req, timeout=self._timeout, context=context) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="replace")
            message = (
                f"Request failed. Received {e.code} response code with body: {_collapse(body)}"
            )
            logger.error("%s %s: %s", props.method, url, message)
            return NetworkError(props.event, message, e.code, body)
        except urllib.error.URLError as e:
            logger.error("%s %s: %s", props.method, url, e.reason)
            return NetworkError(props.event, f"Failed to send request. {e.reason}")
        except OSError as e:
            logger.error("%s %s: %s", props.method, url, e)
            return NetworkError(props.event, f"Failed to send request. {e}")

        if not raw.strip():
            return NetworkResult(props.event, None)
        try:
            payload = json.loads(raw)
        except ValueError as e:
            logger.error("%s %s: unparseable body: %s", props.method, url, e)
            return NetworkError(props.event, f"Failed to parse response! {e}")
        return NetworkResult(props.event, payload)

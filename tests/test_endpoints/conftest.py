"""Fixtures for endpoint tests: a routed fake of the WhatsOnChain API."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest


class FakeAPI:
    """Answers requests by route; unknown routes get a 404.

    Routes are keyed by the path after ``/v1/<chain>/<network>`` (query
    string included) for API calls, and by the plain path for site URLs.
    """

    def __init__(self) -> None:
        self.routes: dict[str, httpx.Response | list[httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        route: str,
        payload: Any = None,
        *,
        text: str | None = None,
        content: bytes | None = None,
        status: int = 200,
    ) -> None:
        if content is not None:
            response = httpx.Response(status, content=content)
        elif text is not None:
            response = httpx.Response(status, text=text)
        else:
            response = httpx.Response(status, json=payload)
        self.routes[route] = response

    def add_sequence(self, route: str, *payloads: Any) -> None:
        self.routes[route] = [httpx.Response(200, json=p) for p in payloads]

    @staticmethod
    def route_of(request: httpx.Request) -> str:
        raw = request.url.raw_path.decode()
        if request.url.host == "api.whatsonchain.com":
            return "/" + raw.split("/", 4)[4]
        return raw

    def bodies(self) -> list[Any]:
        return [json.loads(req.content) for req in self.requests if req.content]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.routes.get(self.route_of(request))
        if isinstance(answer, list):
            # A drained sequence behaves like a missing route
            answer = answer.pop(0) if answer else None
        if answer is None:
            return httpx.Response(404)
        return httpx.Response(
            answer.status_code, headers=answer.headers, content=answer.content
        )


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()

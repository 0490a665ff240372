"""Shared test helpers for endeavour tests."""

from __future__ import annotations

import httpx


class RecordingServer:
    """httpx.MockTransport handler that records PUTs and answers with a fixed status.

    statuses maps a URL to the status it answers with; any other URL gets
    default_status.
    """

    def __init__(
        self,
        default_status: int = 201,
        body: str = "",
        statuses: dict[str, int] | None = None,
    ) -> None:
        self.default_status = default_status
        self.body = body
        self.statuses = statuses or {}
        self.requests: list[httpx.Request] = []
        self.bodies: list[bytes] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(request.read())
        self.requests.append(request)
        status = self.statuses.get(str(request.url), self.default_status)
        return httpx.Response(status, text=self.body)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

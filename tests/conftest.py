"""Shared fixtures: a fake Planning Center API behind httpx.MockTransport."""

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest

from worshipboard.config.settings import PlanningCenterSettings
from worshipboard.domain.ports import PlanningCenterCredentials
from worshipboard.infrastructure.integrations.planning_center_client import (
    PlanningCenterClient,
)


class FakePlanningCenter:
    """Answers requests by URL path and records every request it sees."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any = None, status_code: int = 200) -> None:
        self.routes[path] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"errors": [{"status": "404"}]})
        status_code, body = self.routes[request.url.path]
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def pc_settings() -> PlanningCenterSettings:
    """Planning Center settings isolated from env vars and .env files."""
    return PlanningCenterSettings(_env_file=None, client_id="", client_secret="")


@pytest.fixture
def credentials() -> PlanningCenterCredentials:
    return PlanningCenterCredentials(application_id="app-id", secret="s3cret")


@pytest.fixture
def fake_pc() -> FakePlanningCenter:
    return FakePlanningCenter()


@pytest.fixture
async def pc_client(
    pc_settings: PlanningCenterSettings,
    fake_pc: FakePlanningCenter,
    credentials: PlanningCenterCredentials,
) -> AsyncIterator[PlanningCenterClient]:
    """An initialized client talking to the fake API."""
    client = PlanningCenterClient(pc_settings, transport=fake_pc.transport)
    await client.initialize(credentials)
    yield client
    await client.close()

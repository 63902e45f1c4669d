import httpx
import pytest

from slackistrano.config import Settings
from slackistrano.hooks import DeployEnv


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it answers."""

    def __init__(self, status_code: int = 200, body: str = "ok", error: Exception = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body, request=request)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client_factory(transport):
    def factory(settings):
        return httpx.Client(transport=transport, timeout=settings.timeout)
    return factory


@pytest.fixture
def settings():
    return Settings(verify_ssl=True, timeout=5, dry_run=False)


@pytest.fixture(autouse=True)
def deployer(monkeypatch):
    monkeypatch.setenv("USER", "alice")
    monkeypatch.delenv("USERNAME", raising=False)


@pytest.fixture
def make_env():
    def build(config, dry_run=False, **variables):
        variables.setdefault("application", "shop")
        variables.setdefault("branch", "main")
        variables.setdefault("stage", "production")
        if config is not ...:
            variables["slackistrano"] = config
        return DeployEnv(variables, dry_run=dry_run)
    return build

"""Global test configuration: settings isolated from the user's .env files."""

import pytest

from abiquo_fakes import API, FakeAbiquoApi
from core.config import AppSettings
from core.context import ApiContext


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in ("ENDPOINT", "IDENTITY", "CREDENTIAL", "HTTP_TIMEOUT_SECONDS", "VERIFY_TLS", "USER_AGENT"):
        monkeypatch.delenv(f"ABIQUO_D2_{name}", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, endpoint=API, identity="admin", credential="xabiquo")


@pytest.fixture
def fake_api() -> FakeAbiquoApi:
    return FakeAbiquoApi()


@pytest.fixture
def context(settings, fake_api) -> ApiContext:
    return ApiContext(settings=settings, api=fake_api)

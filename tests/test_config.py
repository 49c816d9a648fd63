import os

import httpx
import pytest

from common import secrets as secrets_module
from helpers import Recorder
from liquidity import ApiKeyProvider, ClientConfig, LiquidityClient, StaticTokenProvider
from liquidity.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # python-dotenv writes straight into os.environ; give each test a private copy
    monkeypatch.setattr(os, "environ", os.environ.copy())
    for key in (
        "LIQUIDITY_BASE_URL",
        "LIQUIDITY_AUTH_STRATEGY",
        "LIQUIDITY_API_KEY",
        "LIQUIDITY_API_SECRET",
        "LIQUIDITY_TIMEOUT_SECONDS",
    ):
        os.environ.pop(key, None)
    monkeypatch.chdir(tmp_path)


def test_defaults(monkeypatch):
    monkeypatch.setenv("LIQUIDITY_API_KEY", "k")
    cfg = ClientConfig.from_env(load_dotenv=False)
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout == DEFAULT_TIMEOUT_SECONDS
    assert isinstance(cfg.credentials, StaticTokenProvider)


def test_overrides_from_secrets():
    secrets_module.secrets.update(
        {
            "LIQUIDITY_BASE_URL": "https://api.liquidity.test/",
            "LIQUIDITY_AUTH_STRATEGY": "api_key",
            "LIQUIDITY_API_KEY": "k",
            "LIQUIDITY_TIMEOUT_SECONDS": "5",
        }
    )
    cfg = ClientConfig.from_env(load_dotenv=False)
    assert cfg.base_url == "https://api.liquidity.test"
    assert cfg.timeout == 5.0
    assert isinstance(cfg.credentials, ApiKeyProvider)


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(
        "LIQUIDITY_BASE_URL=https://dotenv.liquidity.test\nLIQUIDITY_API_KEY=dotenv-key\n"
    )
    monkeypatch.setenv("LIQUIDITY_TIMEOUT_SECONDS", "7")
    cfg = ClientConfig.from_env()

    assert cfg.base_url == "https://dotenv.liquidity.test"
    assert cfg.timeout == 7.0
    assert cfg.credentials.headers() == {"Authorization": "Bearer dotenv-key"}


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("LIQUIDITY_BASE_URL=https://dotenv.liquidity.test\n")
    monkeypatch.setenv("LIQUIDITY_BASE_URL", "https://env.liquidity.test")
    monkeypatch.setenv("LIQUIDITY_API_KEY", "k")

    assert ClientConfig.from_env().base_url == "https://env.liquidity.test"


def test_client_from_config_uses_base_url():
    rec = Recorder(200, {"message": "Ok"})
    cfg = ClientConfig(base_url="https://cfg.liquidity.test", credentials=StaticTokenProvider("test-token"))
    with LiquidityClient.from_config(cfg, transport=httpx.MockTransport(rec)) as client:
        client.floats.update_default_float("f1")
        assert client.base_url == "https://cfg.liquidity.test"

    assert str(rec.last.url) == "https://cfg.liquidity.test/integrator/v1/float/default"


def test_unknown_strategy_fails_at_configuration():
    secrets_module.secrets.update({"LIQUIDITY_AUTH_STRATEGY": "oauth"})
    with pytest.raises(ValueError):
        ClientConfig.from_env(load_dotenv=False)

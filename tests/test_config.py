import pytest

from fakerest.config import DEFAULT_FIXTURES_DIR, OPEN_MODE, RUN_MODE, HarnessConfig


def test_defaults_match_the_public_service():
    config = HarnessConfig()

    assert config.api_base_url == "https://fakerestapi.azurewebsites.net/api/v1"
    assert config.timeout == (15.0, 15.0)
    assert config.command_timeout_ms == 10000
    assert config.default_headers == {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def test_api_base_url_tolerates_trailing_slash():
    config = HarnessConfig(base_url="http://localhost:5000/", api_version="v2")

    assert config.api_base_url == "http://localhost:5000/api/v2"


def test_retries_per_mode():
    config = HarnessConfig(run_mode_retries=3, open_mode_retries=0)

    assert config.retries_for(RUN_MODE) == 3
    assert config.retries_for(OPEN_MODE) == 0
    with pytest.raises(ValueError):
        config.retries_for("headless")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"run_mode_retries": -1},
        {"open_mode_retries": -1},
        {"request_timeout_ms": 0},
        {"response_timeout_ms": -5},
        {"read_back_attempts": 0},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        HarnessConfig(**kwargs)


def test_from_env_reads_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FAKEREST_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("FAKEREST_API_VERSION", "v3")
    monkeypatch.setenv("FAKEREST_REQUEST_TIMEOUT_MS", "2000")
    monkeypatch.setenv("FAKEREST_RESPONSE_TIMEOUT_MS", "4000")
    monkeypatch.setenv("FAKEREST_RUN_MODE_RETRIES", "2")
    monkeypatch.setenv("FAKEREST_OPEN_MODE_RETRIES", "1")
    monkeypatch.setenv("FAKEREST_FIXTURES_DIR", str(tmp_path))

    config = HarnessConfig.from_env()

    assert config.api_base_url == "http://localhost:8080/api/v3"
    assert config.timeout == (2.0, 4.0)
    assert config.run_mode_retries == 2
    assert config.open_mode_retries == 1
    assert config.fixtures_path == tmp_path


def test_fixtures_path_defaults_to_bundled_fixtures():
    assert HarnessConfig().fixtures_path == DEFAULT_FIXTURES_DIR
    assert (DEFAULT_FIXTURES_DIR / "books.json").exists()
    assert (DEFAULT_FIXTURES_DIR / "authors.json").exists()

import pytest

from genderize.config import DEFAULT_BASE_URL, FetchConfig


def test_defaults():
    config = FetchConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout_ms == 5000
    assert config.timeout == 5.0
    assert config.poll_interval == pytest.approx(0.13)


def test_from_env(monkeypatch):
    monkeypatch.setenv('GENDERIZE_BASE_URL', 'http://localhost:8080/?name=')
    monkeypatch.setenv('GENDERIZE_TIMEOUT_MS', '250')
    monkeypatch.setenv('GENDERIZE_POLL_INTERVAL_MS', '50')
    config = FetchConfig.from_env()
    assert config.base_url == 'http://localhost:8080/?name='
    assert config.timeout == 0.25
    assert config.poll_interval_ms == 50


def test_arguments_win_over_env(monkeypatch):
    monkeypatch.setenv('GENDERIZE_TIMEOUT_MS', '250')
    assert FetchConfig.from_env(timeout_ms=900).timeout_ms == 900


def test_env_not_an_integer(monkeypatch):
    monkeypatch.setenv('GENDERIZE_TIMEOUT_MS', '5s')
    with pytest.raises(ValueError, match='GENDERIZE_TIMEOUT_MS'):
        FetchConfig.from_env()


@pytest.mark.parametrize('kwargs', [{'timeout_ms': 0}, {'timeout_ms': -1}, {'poll_interval_ms': 0}])
def test_durations_must_be_positive(kwargs):
    with pytest.raises(ValueError):
        FetchConfig(**kwargs)


def test_numeric_strings_are_coerced():
    config = FetchConfig(timeout_ms='250', poll_interval_ms='20')
    assert config.timeout_ms == 250
    assert config.poll_interval == 0.02


@pytest.mark.parametrize('kwargs, field', [
    ({'timeout_ms': '5s'}, 'timeout_ms'),
    ({'poll_interval_ms': None}, 'poll_interval_ms'),
])
def test_non_numeric_durations_name_the_field(kwargs, field):
    with pytest.raises(ValueError, match=field):
        FetchConfig(**kwargs)

import pytest

from worley.config import ENV_VARIABLES


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep WORLEY_* variables and .env files from leaking into tests."""
    for variable in ENV_VARIABLES.values():
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setattr("worley.config.load_dotenv", lambda *args, **kwargs: False)

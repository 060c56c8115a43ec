import pytest

GROWVPD_ENV_VARS = [
    "GROWVPD_STAGE",
    "GROWVPD_PLANT_AGE_DAYS",
    "GROWVPD_GERMINATION_DATE",
    "GROWVPD_TIMEZONE",
    "GROWVPD_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every GROWVPD_* variable so defaults apply."""
    for name in GROWVPD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

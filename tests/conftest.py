import pytest
from preboot.env import ENV_PREBOOT_APP_ROOT, ENV_PREBOOT_LOG_LEVEL


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	# setenv first so that values written by `env` setters are undone after each test
	for key in (ENV_PREBOOT_APP_ROOT, ENV_PREBOOT_LOG_LEVEL):
		monkeypatch.setenv(key, "")
		monkeypatch.delenv(key)

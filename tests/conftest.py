"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (no database)
    │   ├── domain/
    │   ├── application/
    │   ├── infrastructure/
    │   ├── presentation/
    │   └── config/
    └── integration/           # Tests against a throwaway SQLite database
        ├── persistence/
        └── api/

Integration tests use one SQLite file per test (aiosqlite), so they need no
external services and run by default. Select them with ``-m integration``.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from cashbook_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure no test sees settings cached by another one."""
    clear_settings_cache()
    yield
    clear_settings_cache()

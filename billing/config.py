import json
import os
from pathlib import Path
from pydantic import BaseModel, ValidationError

# Config directory — use BILLING_DATA_DIR env var if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/billing for local dev
_data_dir = os.environ.get("BILLING_DATA_DIR")
CONFIG_DIR = Path(_data_dir) / "config" if _data_dir else Path.home() / ".config" / "billing"
IDENTITIES_FILE = CONFIG_DIR / "identities.json"

DATABASE_URL = os.environ.get("BILLING_DATABASE_URL", f"sqlite:///{CONFIG_DIR / 'billing.db'}")
LOG_LEVEL = os.environ.get("BILLING_LOG_LEVEL", "info")

API_PREFIX = "/api/v1"
PER_PAGE = 20


class IdentityRecord(BaseModel):
    """An API token and the identity it resolves to."""
    token: str
    name: str
    is_admin: bool = False


def ensure_config_dir() -> None:
    """Ensure the config directory exists."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_identities(path: Path | None = None) -> list[IdentityRecord]:
    """Load the identity registry."""
    path = path or IDENTITIES_FILE
    if not path.exists():
        return []

    try:
        with open(path, "r") as f:
            data = json.load(f)
            return [IdentityRecord(**item) for item in data]
    except (json.JSONDecodeError, KeyError, TypeError, ValidationError):
        return []


def save_identities(identities: list[IdentityRecord], path: Path | None = None) -> None:
    """Save the identity registry."""
    if path is None:
        ensure_config_dir()
        path = IDENTITIES_FILE
    with open(path, "w") as f:
        json.dump([identity.model_dump(mode="json") for identity in identities], f, indent=2)

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from mealmate.core.logging_config import get_logger
from mealmate.core.rules import DEFAULT_PREFERRED_CUISINES

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class AppSettings:
    catalog_dir: str = str(PROJECT_ROOT / "data" / "recipes")
    storage_dir: str = str(PROJECT_ROOT / "data" / "storage")
    suggestion_limit: int = 5
    default_preferred_cuisines: List[str] = field(
        default_factory=lambda: list(DEFAULT_PREFERRED_CUISINES)
    )
    catalog_cache_ttl_seconds: int = 300


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_list(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, list):
        items = [str(v).strip().lower() for v in value if str(v).strip()]
        return items or list(default)
    if isinstance(value, str):
        items = [v.strip().lower() for v in value.split(",") if v.strip()]
        return items or list(default)
    return list(default)


def _config_path() -> Path:
    return PROJECT_ROOT / "config" / "mealmate.json"


def load_settings(path: Optional[Path] = None) -> AppSettings:
    """Load settings from the JSON config file, then apply environment overrides.

    Environment variables (optionally from a .env file) win over the file:
    MEALMATE_CATALOG_DIR, MEALMATE_STORAGE_DIR, MEALMATE_SUGGESTION_LIMIT.
    """
    load_dotenv()
    defaults = AppSettings()
    config_path = path or _config_path()
    data: Dict[str, Any] = {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info(f"No config file at {config_path}; using defaults.")
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid config JSON at {config_path}: {exc}")

    catalog_dir = os.getenv("MEALMATE_CATALOG_DIR") or data.get("catalog_dir") or defaults.catalog_dir
    storage_dir = os.getenv("MEALMATE_STORAGE_DIR") or data.get("storage_dir") or defaults.storage_dir
    suggestion_limit = _as_int(
        os.getenv("MEALMATE_SUGGESTION_LIMIT", data.get("suggestion_limit")),
        defaults.suggestion_limit
    )

    return AppSettings(
        catalog_dir=str(catalog_dir),
        storage_dir=str(storage_dir),
        suggestion_limit=suggestion_limit,
        default_preferred_cuisines=_as_list(
            data.get("default_preferred_cuisines"), defaults.default_preferred_cuisines
        ),
        catalog_cache_ttl_seconds=_as_int(
            data.get("catalog_cache_ttl_seconds"), defaults.catalog_cache_ttl_seconds
        )
    )

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .logging_config import get_logger


DEFAULT_CONFIG_PATH = Path("config.toml")

logger = get_logger("config")


@dataclass(frozen=True)
class SunfConfig:
    raw: Dict[str, Any]

    @staticmethod
    def load(path: str | Path) -> "SunfConfig":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config not found: {p}")
        data = _load_toml(p)
        if not isinstance(data, dict):
            raise ValueError("config.toml must parse to a table")
        logger.debug("loaded config from %s", p)
        return SunfConfig(raw=data)

    def get(self, *keys: str, default: Any = None) -> Any:
        cur: Any = self.raw
        for k in keys:
            if not isinstance(cur, dict) or k not in cur:
                return default
            cur = cur[k]
        return cur


def load_optional_config(path: str | Path | None) -> SunfConfig | None:
    """Load ``path`` if given, else ./config.toml when it exists, else None."""
    if path is not None:
        return SunfConfig.load(path)
    if DEFAULT_CONFIG_PATH.exists():
        return SunfConfig.load(DEFAULT_CONFIG_PATH)
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    import tomllib

    return tomllib.loads(path.read_text(encoding="utf-8"))

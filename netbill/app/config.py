from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List


def _parse_simple_env(text: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        k, v = line.split("=", 1)
        out[k.strip()] = v.strip()
    return out


def _read_env_file(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {path}")
    return _parse_simple_env(path.read_text(encoding="utf-8"))


def load_env_stack(project_root: Path | None = None) -> List[Path]:
    if project_root is None:
        project_root = Path(__file__).resolve().parents[2]

    stack_path = project_root / "env" / "stack.env"
    stack = _read_env_file(stack_path)

    env_files = stack.get("ENV_FILES", "").strip()
    if not env_files:
        raise RuntimeError("env/stack.env must define ENV_FILES=...")

    loaded: List[Path] = []
    merged: Dict[str, str] = {}

    for rel in [x.strip() for x in env_files.split(",") if x.strip()]:
        p = (project_root / rel).resolve()
        merged.update(_read_env_file(p))
        loaded.append(p)

    # Set defaults from files, but allow real environment to override
    for k, v in merged.items():
        os.environ.setdefault(k, v)

    return loaded


@dataclass(frozen=True)
class Settings:
    # --- ENV ---
    env_name: str
    log_level: str
    log_format: str

    # --- BILLING ---
    billing_currency: str
    billing_due_soon_days: int
    billing_invoice_prefix: str

    @property
    def log_as_json(self) -> bool:
        return self.log_format == "json"


_settings_cache: dict[str, Settings] = {}


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, "").strip() or default
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid {name}={raw!r} (must be int)") from e


def get_settings(project_root: Path | None = None) -> Settings:
    cache_key = os.getenv("ENV_NAME", "").strip().lower() or "default"
    if cache_key in _settings_cache:
        return _settings_cache[cache_key]

    load_env_stack(project_root=project_root)

    log_format = os.getenv("LOG_FORMAT", "text").strip().lower() or "text"
    if log_format not in ("json", "text"):
        raise RuntimeError(f"Unknown LOG_FORMAT={log_format}. Expected json/text.")

    due_soon_days = _int_env("BILLING_DUE_SOON_DAYS", "3")
    if due_soon_days < 0:
        raise RuntimeError(f"Invalid BILLING_DUE_SOON_DAYS={due_soon_days} (must be >= 0)")

    s = Settings(
        # --- ENV ---
        env_name=os.getenv("ENV_NAME", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_format=log_format,

        # --- BILLING ---
        billing_currency=os.getenv("BILLING_CURRENCY", "USD").strip().upper() or "USD",
        billing_due_soon_days=due_soon_days,
        billing_invoice_prefix=os.getenv("BILLING_INVOICE_PREFIX", "INV").strip() or "INV",
    )

    _settings_cache[cache_key] = s
    return s

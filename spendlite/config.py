from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import yaml

DEFAULT_CONFIG: Dict[str, object] = {
    "bank_loaders": {
        "csv": "spendlite.loaders.bank_csv.BankCSVLoader",
    },
    "output_modules": {
        "text": "spendlite.outputs.totals_report.TotalsReportOutput",
    },
    "rules_file": None,
    "output_dir": "data",
    "page_size": 10,
    "log_level": "INFO",
}

LOG_LEVEL_ENV = "SPENDLITE_LOG_LEVEL"


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    if path is None:
        return _merge_defaults({}, DEFAULT_CONFIG)
    with Path(path).open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return _merge_defaults(data, DEFAULT_CONFIG)


def log_level(config: Dict[str, object]) -> str:
    return str(os.getenv(LOG_LEVEL_ENV) or config.get("log_level") or "INFO").upper()

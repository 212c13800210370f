"""
Configuration for fnloc.

Defaults live in ``DEFAULT_CONFIG``; a YAML or JSON file can override any
part of it and command-line flags override the file.

Example ``.fnloc.yaml``:

```yaml
scan:
  directory: ./src
  jobs: 4
report:
  format: table
  sort: complexity
  min_lines: 5
  limit: 20
thresholds:
  nesting:
    moderate: 3
    high: 5
```
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from fnloc.utils.files import IGNORED_DIRS


CONFIG_FILE_NAMES = [
    ".fnloc.yaml",
    ".fnloc.yml",
    ".fnloc.json",
]

OUTPUT_FORMATS = ["table", "json", "csv"]

SORT_KEYS = ["total", "code", "comments", "name", "complexity", "nesting"]

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "scan": {
        "directory": "./src",
        "ignored_dirs": sorted(IGNORED_DIRS),
        "jobs": 1,
    },
    "report": {
        "format": "table",
        "sort": "code",
        "min_lines": 0,
        "limit": None,
        "qualify_names": True,
        "color": True,
    },
    "thresholds": {
        "complexity": {
            "moderate": 10,
            "high": 20,
        },
        "nesting": {
            "moderate": 4,
            "high": 6,
        },
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config_file(path: str) -> Dict[str, Any]:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = config_path.read_text(encoding="utf-8")
    if config_path.suffix.lower() == ".json":
        data = json.loads(raw)
    else:
        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def find_config(start_path: str = ".") -> Optional[str]:
    """Search ``start_path`` and its parents for a config file."""
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent
    while True:
        for name in CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return str(candidate)
        if current == current.parent:
            return None
        current = current.parent


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def default(cls) -> "Config":
        return cls(copy.deepcopy(DEFAULT_CONFIG))

    @classmethod
    def load(cls, path: Optional[str]) -> "Config":
        if not path:
            return cls.default()
        merged = _deep_merge(DEFAULT_CONFIG, load_config_file(path))
        config = cls(merged)
        config.validate()
        return config

    def with_overrides(self, overrides: Dict[str, Any]) -> "Config":
        config = Config(_deep_merge(self.data, overrides))
        config.validate()
        return config

    def validate(self) -> None:
        report = self.report()
        if report.get("format") not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {report.get('format')}")
        if report.get("sort") not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {report.get('sort')}")
        if int(report.get("min_lines") or 0) < 0:
            raise ValueError("min_lines must not be negative")
        limit = report.get("limit")
        if limit is not None and int(limit) < 0:
            raise ValueError("limit must not be negative")
        jobs = self.scan().get("jobs")
        if jobs is not None and int(jobs) < 1:
            raise ValueError("jobs must be at least 1")
        self._validate_thresholds()

    def _validate_thresholds(self) -> None:
        thresholds = self.thresholds()
        if not isinstance(thresholds, dict):
            raise ValueError("thresholds must be a mapping")
        for metric in ("complexity", "nesting"):
            levels = thresholds.get(metric)
            if not isinstance(levels, dict):
                raise ValueError(f"thresholds.{metric} must map levels to integers")
            for level, value in levels.items():
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"thresholds.{metric}.{level} must be an integer")

    def scan(self) -> Dict[str, Any]:
        return self.data.get("scan", {})

    def report(self) -> Dict[str, Any]:
        return self.data.get("report", {})

    def thresholds(self) -> Dict[str, Any]:
        return self.data.get("thresholds", {})

    def directory(self) -> str:
        return self.scan().get("directory", "./src")

    def ignored_dirs(self) -> List[str]:
        return list(self.scan().get("ignored_dirs", []))

    def jobs(self) -> int:
        return int(self.scan().get("jobs") or 1)

"""Configuration loading."""

import copy
from typing import Any

import yaml

from .rules import RULES_BY_ID

DEFAULTS: dict[str, Any] = {
    "log_level": "warn",
    "summary_on_exit": True,
    "width": 100,
    "rules": {rule_id: True for rule_id in RULES_BY_ID},
}


def load_config(path: str = "corsdoctor.yaml") -> dict[str, Any]:
    """Load YAML config. Returns defaults if the file is missing; fills missing keys from defaults."""
    config = copy.deepcopy(DEFAULTS)
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return config
    if not data:
        return config
    for k, v in data.items():
        if k == "rules" and isinstance(v, dict):
            config["rules"].update(v)
        else:
            config[k] = v
    return config


def enabled_rules(config: dict[str, Any]) -> list:
    """Rule functions switched on in *config*, in canonical order."""
    toggles = config.get("rules") or {}
    return [rule for rule_id, rule in RULES_BY_ID.items() if toggles.get(rule_id, True)]

#!/usr/bin/env python3
"""
Alarm list loader

Reads the list of CloudWatch alarm names from a YAML document:

    cloudwatch_alarm_list:
      - my-service-high-cpu
      - my-service-5xx
"""

import os
from typing import List

import yaml

from alarm_errors import ConfigError

ALARM_LIST_KEY = "cloudwatch_alarm_list"
DEFAULT_ALARM_FILE = "cloudwatch-alarms.yaml"


def load_alarms_from_yaml(file_path: str = DEFAULT_ALARM_FILE) -> List[str]:
    """Load the ordered list of alarm names. Duplicates are kept."""
    if not os.path.exists(file_path):
        raise ConfigError(f"Alarm list file '{file_path}' not found")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"error reading YAML file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"error parsing YAML file '{file_path}': {e}") from e

    if document is None:
        return []

    if not isinstance(document, dict):
        raise ConfigError(f"'{file_path}' must contain a mapping at the top level")

    alarm_names = document.get(ALARM_LIST_KEY)
    if alarm_names is None:
        return []

    if not isinstance(alarm_names, list):
        raise ConfigError(f"'{ALARM_LIST_KEY}' in '{file_path}' must be a list")

    return [
        _as_alarm_name(alarm_name, index, file_path)
        for index, alarm_name in enumerate(alarm_names)
    ]


def _as_alarm_name(value, index: int, file_path: str) -> str:
    # Unquoted scalars such as `- 404` are resolved to int/float/bool by YAML
    if isinstance(value, bool):
        value = "true" if value else "false"
    elif isinstance(value, (int, float)):
        value = str(value)

    if not isinstance(value, str) or value == "":
        raise ConfigError(
            f"'{ALARM_LIST_KEY}' entry #{index + 1} in '{file_path}' is not a valid alarm name: {value!r}"
        )
    return value

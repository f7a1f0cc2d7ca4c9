#!/usr/bin/env python3
"""Tests for loading the alarm list YAML file"""

import os
import shutil
import tempfile
import unittest

from alarm_config_loader import load_alarms_from_yaml
from alarm_errors import ConfigError


class TestLoadAlarmsFromYaml(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def write_file(self, content, name="cloudwatch-alarms.yaml"):
        path = os.path.join(self.temp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_loads_names_in_order(self):
        path = self.write_file("cloudwatch_alarm_list:\n  - b-alarm\n  - a-alarm\n  - c-alarm\n")
        self.assertEqual(load_alarms_from_yaml(path), ["b-alarm", "a-alarm", "c-alarm"])

    def test_keeps_duplicates(self):
        path = self.write_file("cloudwatch_alarm_list:\n  - a\n  - a\n")
        self.assertEqual(load_alarms_from_yaml(path), ["a", "a"])

    def test_missing_key_gives_empty_list(self):
        path = self.write_file("other_setting: true\n")
        self.assertEqual(load_alarms_from_yaml(path), [])

    def test_empty_document_gives_empty_list(self):
        path = self.write_file("")
        self.assertEqual(load_alarms_from_yaml(path), [])

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_alarms_from_yaml(os.path.join(self.temp_dir, "nope.yaml"))

    def test_malformed_yaml(self):
        path = self.write_file("cloudwatch_alarm_list: [a, b\n")
        with self.assertRaises(ConfigError):
            load_alarms_from_yaml(path)

    def test_top_level_must_be_mapping(self):
        path = self.write_file("- a\n- b\n")
        with self.assertRaises(ConfigError):
            load_alarms_from_yaml(path)

    def test_alarm_list_must_be_list(self):
        path = self.write_file("cloudwatch_alarm_list: just-one-alarm\n")
        with self.assertRaises(ConfigError):
            load_alarms_from_yaml(path)

    def test_unquoted_scalars_become_names(self):
        path = self.write_file("cloudwatch_alarm_list:\n  - 404\n  - cpu-high\n  - 1.5\n  - true\n")
        self.assertEqual(load_alarms_from_yaml(path), ["404", "cpu-high", "1.5", "true"])

    def test_whitespace_name_is_kept(self):
        path = self.write_file("cloudwatch_alarm_list:\n  - '  '\n  - cpu-high\n")
        self.assertEqual(load_alarms_from_yaml(path), ["  ", "cpu-high"])

    def test_rejects_empty_null_and_nested_entries(self):
        bodies = (
            "cloudwatch_alarm_list:\n  - ''\n",
            "cloudwatch_alarm_list:\n  - \n  - cpu-high\n",
            "cloudwatch_alarm_list:\n  - name: cpu-high\n",
            "cloudwatch_alarm_list:\n  - [a, b]\n",
        )
        for body in bodies:
            with self.subTest(body=body):
                path = self.write_file(body)
                with self.assertRaises(ConfigError):
                    load_alarms_from_yaml(path)


if __name__ == "__main__":
    unittest.main()

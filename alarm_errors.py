#!/usr/bin/env python3
"""
Error types for the CloudWatch alarm cleanup tool

ConfigError and CredentialError are fatal and stop the run before any alarm
is touched. CheckError and DeleteError are raised per alarm and handled by
the reconciliation workflow.
"""


class AlarmCleanupError(Exception):
    """Base class for all alarm cleanup errors"""


class ConfigError(AlarmCleanupError):
    """Alarm list file is missing, unreadable or malformed"""


class CredentialError(AlarmCleanupError):
    """CloudWatch client could not be built for the selected profile/region"""


class AlarmOperationError(AlarmCleanupError):
    """A single alarm operation failed"""

    action = "operate on"

    def __init__(self, alarm_name: str, cause: Exception):
        self.alarm_name = alarm_name
        self.cause = cause
        super().__init__(f"error {self.action} alarm {alarm_name}: {cause}")


class CheckError(AlarmOperationError):
    action = "describing"


class DeleteError(AlarmOperationError):
    action = "deleting"

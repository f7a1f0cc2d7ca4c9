#!/usr/bin/env python3
"""
CloudWatch Alarm Manager

Thin wrapper around the boto3 CloudWatch client with the two operations the
cleanup needs: an existence check and a delete, one alarm name per call.
"""

import logging
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from alarm_errors import CheckError, CredentialError, DeleteError
from logger import LOGGER_NAME

DEFAULT_ENVIRONMENT = "currentsite-dev"
DEFAULT_REGION = "ap-northeast-1"

# Environment name -> shared config profile
ENVIRONMENT_PROFILES = {
    "currentsite-dev": "currentsite-dev",
    "currentsite-prod": "currentsite-prod",
}

ALARM_TYPES = ["MetricAlarm", "CompositeAlarm"]

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class EnvironmentConfig:
    """Profile and region selection for the CloudWatch client"""

    environment: str = DEFAULT_ENVIRONMENT
    region: str = DEFAULT_REGION

    @property
    def profile_name(self) -> str:
        return ENVIRONMENT_PROFILES.get(self.environment, ENVIRONMENT_PROFILES[DEFAULT_ENVIRONMENT])

    @property
    def region_name(self) -> str:
        return self.region or DEFAULT_REGION


class CloudWatchAlarmManager:
    def __init__(self, cw_client):
        self.cw_client = cw_client

    @classmethod
    def from_environment(cls, env_config: EnvironmentConfig) -> "CloudWatchAlarmManager":
        """Build a manager from the shared config profile for the environment"""
        try:
            session = boto3.Session(
                profile_name=env_config.profile_name,
                region_name=env_config.region_name,
            )
            if session.get_credentials() is None:
                raise CredentialError(
                    f"no credentials found for profile '{env_config.profile_name}'"
                )
            cw_client = session.client("cloudwatch")
        except BotoCoreError as e:
            raise CredentialError(f"unable to load SDK config, {e}") from e

        logger.debug(
            f"CloudWatch client ready (profile={env_config.profile_name}, region={env_config.region_name})"
        )
        return cls(cw_client)

    def alarm_exists(self, alarm_name: str) -> bool:
        """True if a metric or composite alarm with exactly this name exists"""
        try:
            response = self.cw_client.describe_alarms(
                AlarmNames=[alarm_name], AlarmTypes=ALARM_TYPES
            )
        except (ClientError, BotoCoreError) as e:
            raise CheckError(alarm_name, e) from e

        logger.debug(f"DescribeAlarms result for {alarm_name}: {response}")

        return bool(response.get("MetricAlarms") or response.get("CompositeAlarms"))

    def delete_alarm(self, alarm_name: str) -> None:
        try:
            self.cw_client.delete_alarms(AlarmNames=[alarm_name])
        except (ClientError, BotoCoreError) as e:
            raise DeleteError(alarm_name, e) from e

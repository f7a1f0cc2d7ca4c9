#!/usr/bin/env python3
"""
CloudWatch Alarm Cleanup

Deletes the CloudWatch alarms listed in a YAML file after checking that they
exist and asking for confirmation.

Usage:
    python cleanup_cloudwatch_alarms.py --env currentsite-prod --region ap-northeast-1
"""

import argparse
import sys

from alarm_config_loader import DEFAULT_ALARM_FILE, load_alarms_from_yaml
from alarm_errors import ConfigError, CredentialError
from alarm_reconciliation import AlarmReconciler
from cloudwatch_alarm_manager import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_REGION,
    CloudWatchAlarmManager,
    EnvironmentConfig,
)
from logger import LOGGER_NAME, setup_logger
from text_symbols import Symbols

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_DELETE_FAILED = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Delete the CloudWatch alarms listed in a YAML file")
    parser.add_argument("--env", default=DEFAULT_ENVIRONMENT,
                        help=f"Environment name, selects the AWS profile (default: {DEFAULT_ENVIRONMENT})")
    parser.add_argument("--region", default=DEFAULT_REGION,
                        help=f"AWS region (default: {DEFAULT_REGION})")
    parser.add_argument("--config", "-c", default=DEFAULT_ALARM_FILE,
                        help=f"Path to the alarm list YAML file (default: {DEFAULT_ALARM_FILE})")
    parser.add_argument("--log-dir", default="logs",
                        help="Directory for the detailed log file, empty to disable (default: logs)")
    parser.add_argument("--fail-on-error", action="store_true",
                        help="Exit with status 2 when any deletion failed")
    return parser.parse_args(argv)


def run(args, confirm=input, manager_factory=CloudWatchAlarmManager.from_environment) -> int:
    logger = setup_logger(LOGGER_NAME, "alarm_cleanup", args.log_dir or None)

    logger.info("Loading CloudWatch alarms from YAML file...")
    try:
        alarm_names = load_alarms_from_yaml(args.config)
    except ConfigError as e:
        logger.error(f"Error loading alarms: {e}")
        return EXIT_FATAL
    logger.info(f"Found {len(alarm_names)} CloudWatch alarms")

    env_config = EnvironmentConfig(environment=args.env, region=args.region)
    logger.info(f"{Symbols.KEY} Profile: {env_config.profile_name} | {Symbols.REGION} Region: {env_config.region_name}")
    try:
        manager = manager_factory(env_config)
    except CredentialError as e:
        logger.critical(f"Failed to create CloudWatch manager: {e}")
        return EXIT_FATAL

    result = AlarmReconciler(manager, confirm=confirm, logger=logger).run(alarm_names)

    if args.fail_on_error and result.has_failures:
        return EXIT_DELETE_FAILED
    return EXIT_OK


def main():
    args = parse_args()
    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        print(f"\n{Symbols.ERROR} Interrupted")
        sys.exit(EXIT_FATAL)


if __name__ == "__main__":
    main()

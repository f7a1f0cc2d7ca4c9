#!/usr/bin/env python3
"""
Alarm reconciliation workflow

Runs the configured alarm list against CloudWatch in four strictly ordered
phases:

    CHECK   - describe every alarm in list order, sort into existing /
              non-existent, skip the ones whose check errored
    GATE    - ask the operator once before deleting anything
    DELETE  - delete every existing alarm in CHECK order, recording
              successes and failures
    REPORT  - print counts and the deleted / failed names

A failed check never deletes an unverified alarm, and a failed delete never
stops the remaining deletes.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from colorama import Fore, Style

from alarm_errors import CheckError, DeleteError
from text_symbols import Symbols

AFFIRMATIVE_ANSWERS = ("yes", "y", "YES", "Y")


@dataclass
class ReconciliationResult:
    existing: List[str] = field(default_factory=list)
    non_existent: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    checked: int = 0
    confirmed: bool = False
    cancelled: bool = False

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)


def is_affirmative(answer: Optional[str]) -> bool:
    return answer in AFFIRMATIVE_ANSWERS


class AlarmReconciler:
    def __init__(self, manager, confirm: Callable[[str], str] = input, logger=None):
        """
        manager: object with alarm_exists(name) -> bool and delete_alarm(name)
        confirm: reads one line of operator input, given the prompt text
        logger: optional AlarmCleanupLogger for per-alarm log records
        """
        self.manager = manager
        self.confirm = confirm
        self.logger = logger

    def print_colored(self, color: str, message: str, end: str = "\n"):
        print(f"{color}{message}{Style.RESET_ALL}", end=end, flush=True)

    def _log_action(self, alarm_name: str, action: str, status: str, details: str = ""):
        if self.logger:
            self.logger.log_alarm_action(alarm_name, action, status, details)

    def _log_failure(self, alarm_name: str, action: str, message: str, cause: Exception):
        # Logged failures reach the console through the logger's handler
        if self.logger:
            self.logger.log_alarm_action(alarm_name, action, "ERROR", str(cause))
        else:
            self.print_colored(Fore.RED, f"{Symbols.ERROR} {message}: {cause}")

    def run(self, alarm_names: List[str]) -> ReconciliationResult:
        result = ReconciliationResult()

        self.check_alarms(alarm_names, result)

        if not result.existing:
            self.print_colored(Fore.YELLOW, f"\n{Symbols.INFO} No alarms to delete. Exiting.")
            self.report(result)
            return result

        if not self.confirm_deletion(len(result.existing)):
            result.cancelled = True
            self.print_colored(Fore.YELLOW, f"{Symbols.SKIP} Deletion cancelled by user.")
            self._log_action("*", "CONFIRM", "CANCELLED", f"{len(result.existing)} alarm(s) kept")
            self.report(result)
            return result

        result.confirmed = True
        self.delete_alarms(result)
        self.report(result)
        return result

    def check_alarms(self, alarm_names: List[str], result: ReconciliationResult):
        """CHECK phase: classify every alarm name in list order"""
        self.print_colored(Fore.CYAN, "====== Checking alarms Existence ======")

        total = len(alarm_names)
        for i, alarm_name in enumerate(alarm_names, 1):
            print(f"[{i}/{total}] Checking alarm: {alarm_name}... ", end="", flush=True)
            result.checked += 1

            try:
                exists = self.manager.alarm_exists(alarm_name)
            except CheckError as e:
                self.print_colored(Fore.RED, Symbols.ERROR)
                result.skipped.append(alarm_name)
                self._log_failure(alarm_name, "CHECK_EXISTS", f"Error checking alarm {alarm_name}", e.cause)
                continue

            if exists:
                result.existing.append(alarm_name)
                self.print_colored(Fore.GREEN, "Exists")
                self._log_action(alarm_name, "CHECK_EXISTS", "EXISTS")
            else:
                result.non_existent.append(alarm_name)
                self.print_colored(Fore.WHITE, "Does not exist")
                self._log_action(alarm_name, "CHECK_EXISTS", "NOT_EXISTS")

    def confirm_deletion(self, count: int) -> bool:
        """GATE phase: one line of operator input decides the whole run"""
        self.print_colored(Fore.RED, "\n=== Deletion Confirmation ===")
        prompt = f"{Symbols.ALERT} About to delete {count} alarm(s). Do you want to continue? (yes/no): "

        try:
            answer = self.confirm(prompt)
        except EOFError:
            answer = ""

        return is_affirmative(answer)

    def delete_alarms(self, result: ReconciliationResult):
        """DELETE phase: attempt every existing alarm, no retries"""
        self.print_colored(Fore.CYAN, "\n====== Deleting Alarms ======")

        total = len(result.existing)
        for i, alarm_name in enumerate(result.existing, 1):
            print(f"[{i}/{total}] Deleting alarm: {alarm_name}... ", end="", flush=True)

            try:
                self.manager.delete_alarm(alarm_name)
            except DeleteError as e:
                result.failed.append(alarm_name)
                self.print_colored(Fore.RED, f"FAILED {Symbols.CROSS}")
                self._log_failure(alarm_name, "DELETE", f"Failed to delete {alarm_name}", e.cause)
                continue

            result.deleted.append(alarm_name)
            self.print_colored(Fore.GREEN, f"DELETED {Symbols.OK}")
            self._log_action(alarm_name, "DELETE", "DELETED")

    def report(self, result: ReconciliationResult):
        """REPORT phase"""
        self.print_colored(Fore.CYAN, "\n=== Final Summary ===")
        if result.cancelled:
            self.print_colored(Fore.YELLOW, f"{Symbols.SKIP} Deletion was cancelled, no alarms were deleted")
        if result.skipped:
            self.print_colored(Fore.YELLOW, f"{Symbols.WARN} Skipped (check failed): {len(result.skipped)} alarm(s)")
        print(f"{Symbols.STATS} Successfully deleted: {len(result.deleted)} alarm(s)")
        print(f"{Symbols.STATS} Failed deletions: {len(result.failed)} alarm(s)")

        if result.failed:
            self.print_colored(Fore.RED, "\nFailed to delete:")
            for alarm_name in result.failed:
                print(f"  - {alarm_name}")

        if result.deleted:
            self.print_colored(Fore.GREEN, "\nSuccessfully deleted:")
            for alarm_name in result.deleted:
                print(f"  - {alarm_name}")

        if self.logger:
            self.logger.log_summary(
                result.checked, len(result.deleted), len(result.failed), len(result.skipped)
            )

        self.print_colored(Fore.GREEN, f"\n{Symbols.OK} Operation completed!")

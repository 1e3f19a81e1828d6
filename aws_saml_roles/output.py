"""
Centralized output handling with consistent formatting.

This module provides a single point of control for all user-facing output,
ensuring consistent formatting and making it easy to modify output behavior.
"""

import json
import logging
from typing import Any, List, Optional

from .types import IamRoleAssignment

logger = logging.getLogger(__name__)


class OutputHandler:
    """Centralized output handling with consistent formatting."""

    @staticmethod
    def step_completed(step_name: str, attributes_in: int, attributes_out: int) -> None:
        """
        Log step completion with attribute counts.

        Args:
            step_name: Name of the processing step
            attributes_in: Number of attributes before the step ran
            attributes_out: Number of attributes after the step ran
        """
        logger.info(
            f"{step_name} completed: "
            f"{attributes_in} attributes in, "
            f"{attributes_out} attributes out"
        )

    @staticmethod
    def error(title: str, error: Exception) -> None:
        """
        Print formatted error message.

        Args:
            title: Error title
            error: Exception that occurred
        """
        print(f"\n🚨 {title}:\n{error}\n")

    @staticmethod
    def success(title: str, data: Optional[Any] = None) -> None:
        """
        Print formatted success message.

        Args:
            title: Success message title
            data: Optional data to display (dict will be JSON formatted)
        """
        print(f"\n✅ {title}")
        if not data:
            return

        if isinstance(data, dict):
            print(json.dumps(data, indent=2, default=str))
            return

        print(data)

    @staticmethod
    def role_assignments(assignments: List[IamRoleAssignment]) -> None:
        """
        Print the IAM roles a user was granted.

        Args:
            assignments: Parsed Role attribute values
        """
        OutputHandler.section_header("IAM ROLE ASSIGNMENTS")
        if not assignments:
            print("(none)")
            return

        for assignment in assignments:
            print(f"{assignment.role_name} via {assignment.provider_name} in account {assignment.account_id}")

    @staticmethod
    def section_header(title: str) -> None:
        """
        Print section header with divider.

        Args:
            title: Section title
        """
        print("\n" + "=" * 80)
        print(title)
        print("=" * 80)

"""
Processing step framework for SAML attribute pipelines.

This module provides the TransformStep capability a host pipeline calls once
per authentication event, and the SetAwsAttributes step that adds the AWS
IAM attributes. Concrete steps only need to implement transform().
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from .config import RoleMappingConfig, build_role_mapping_config
from .output import OutputHandler
from .transform import apply_aws_attributes
from .types import AttributeMap


class TransformStep(ABC):
    """
    Abstract base class for attribute processing steps.

    Steps are configured once at startup and are safe to share between
    concurrent requests: process() only touches the attribute set it is given.
    """

    STEP_NAME: str

    @abstractmethod
    def transform(self, attributes: AttributeMap) -> AttributeMap:
        """
        Transform a user's attribute set.

        Args:
            attributes: User attribute set owned by the caller

        Returns:
            The transformed attribute set
        """

    def process(self, attributes: AttributeMap) -> AttributeMap:
        """
        Run the step (template method).

        Args:
            attributes: User attribute set owned by the caller

        Returns:
            The transformed attribute set
        """
        attribute_count = len(attributes)
        result = self.transform(attributes)
        OutputHandler.step_completed(self.STEP_NAME, attribute_count, len(result))
        return result


class SetAwsAttributes(TransformStep):
    """Add the AWS Role, RoleSessionName and SessionDuration attributes."""

    STEP_NAME = "set_aws_attributes"

    def __init__(self, config: RoleMappingConfig) -> None:
        self.config = config

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "SetAwsAttributes":
        """
        Create the step from raw filter options.

        Args:
            options: Filter option mapping (e.g. {'aws.account': ..., 'iam.roles': ...})

        Returns:
            Configured SetAwsAttributes step

        Raises:
            ConfigError: If the options are invalid
        """
        return cls(build_role_mapping_config(options))

    def transform(self, attributes: AttributeMap) -> AttributeMap:
        return apply_aws_attributes(attributes, self.config)

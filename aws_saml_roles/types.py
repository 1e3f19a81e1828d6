"""
Shared data types and models for the aws_saml_roles package.

This module contains the attribute map alias and the data classes used
across the package to avoid circular import issues.
"""

import re
from dataclasses import dataclass
from typing import Dict, List

from .constants import (
    IAM_ROLE_ARN_FORMAT,
    IAM_ROLE_ARN_PATTERN,
    SAML_PROVIDER_ARN_FORMAT,
    SAML_PROVIDER_ARN_PATTERN,
)


AttributeMap = Dict[str, List[str]]
"""Mapping of SAML attribute names to their ordered values."""


@dataclass(frozen=True)
class IamRoleAssignment:
    """
    One value of the AWS SAML Role attribute.

    IAM expects the role ARN and the SAML provider ARN joined by a comma,
    role first.

    Attributes:
        role_arn: ARN of the IAM role the user may assume
        provider_arn: ARN of the IAM SAML identity provider
    """
    role_arn: str
    provider_arn: str

    @classmethod
    def for_role(cls, account_id: str, role_name: str, provider_name: str) -> "IamRoleAssignment":
        """
        Build the assignment for a role and provider in one account.

        Args:
            account_id: 12-digit AWS account ID
            role_name: IAM role name
            provider_name: Name of the SAML provider registration in IAM

        Returns:
            IamRoleAssignment with both ARNs in the given account
        """
        return cls(
            role_arn=IAM_ROLE_ARN_FORMAT.format(account_id=account_id, role_name=role_name),
            provider_arn=SAML_PROVIDER_ARN_FORMAT.format(account_id=account_id, provider_name=provider_name),
        )

    @classmethod
    def from_attribute_value(cls, value: str) -> "IamRoleAssignment":
        """
        Parse a Role attribute value.

        Identity providers are inconsistent about the order of the two ARNs,
        so either order is accepted.

        Args:
            value: Comma separated role ARN and SAML provider ARN

        Returns:
            Parsed IamRoleAssignment

        Raises:
            ValueError: If the value is not one role ARN plus one provider ARN
        """
        parts = [part.strip() for part in value.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected two comma separated ARNs in Role value: {value!r}")

        roles = [part for part in parts if re.match(IAM_ROLE_ARN_PATTERN, part)]
        providers = [part for part in parts if re.match(SAML_PROVIDER_ARN_PATTERN, part)]
        if len(roles) != 1 or len(providers) != 1:
            raise ValueError(f"Role value must hold one role ARN and one saml-provider ARN: {value!r}")

        return cls(role_arn=roles[0], provider_arn=providers[0])

    def to_attribute_value(self) -> str:
        """Return the value as IAM expects it in the Role attribute."""
        return f"{self.role_arn},{self.provider_arn}"

    @property
    def role_name(self) -> str:
        return self.role_arn.split(":role/", 1)[1]

    @property
    def provider_name(self) -> str:
        return self.provider_arn.split(":saml-provider/", 1)[1]

    @property
    def account_id(self) -> str:
        # Format: arn:aws:iam::account-id:role/name
        return self.role_arn.split(":")[4]

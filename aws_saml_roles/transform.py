"""
AWS SAML attribute transformation.

This module derives the AWS-specific attributes IAM reads from a SAML
assertion and adds them to a user's attribute set:

- Role: allowed pairings of IAM role and SAML provider
- RoleSessionName: unique identifier of the federated user
- SessionDuration: lifetime of the console/API session
"""

import logging
from typing import Any, Iterable, List, Mapping, Set

from .config import RoleMappingConfig
from .constants import (
    ROLE_ATTRIBUTE,
    ROLE_SESSION_NAME_ATTRIBUTE,
    SESSION_DURATION_ATTRIBUTE,
)
from .types import AttributeMap, IamRoleAssignment
from .utils import as_list

logger = logging.getLogger(__name__)


class MissingAttributeError(Exception):
    """Raised when the attribute naming the session is absent or empty."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"No session name available (should have been in {attribute!r})")
        self.attribute = attribute


def role_attribute_value(config: RoleMappingConfig, iam_role: str) -> str:
    """
    Build the Role attribute value for an IAM role.

    Args:
        config: Role mapping configuration
        iam_role: IAM role name

    Returns:
        Role ARN and SAML provider ARN joined by a comma
    """
    assignment = IamRoleAssignment.for_role(config.account_id, iam_role, config.provider_name)
    return assignment.to_attribute_value()


def collect_local_roles(attributes: Mapping[str, Any], role_attributes: Iterable[str]) -> Set[str]:
    """
    Gather the user's local roles from every role-source attribute.

    Args:
        attributes: User attribute set
        role_attributes: Names of attributes holding local role names/ids

    Returns:
        Union of all values; attributes the user lacks contribute nothing
    """
    local_roles: Set[str] = set()
    for name in role_attributes:
        local_roles.update(str(value) for value in as_list(attributes.get(name)))
    return local_roles


def match_iam_roles(local_roles: Set[str], config: RoleMappingConfig) -> List[str]:
    """
    Select the IAM roles granted by a user's local roles.

    Args:
        local_roles: The user's local role names/ids
        config: Role mapping configuration

    Returns:
        Matching IAM role names in configured order; at most one unless
        config.match_all is set
    """
    matched: List[str] = []
    for grant in config.role_grants:
        if local_roles & grant.local_roles:
            matched.append(grant.iam_role)
            if not config.match_all:
                break
    return matched


def _session_name(attributes: Mapping[str, Any], uid_attribute: str) -> str:
    values = as_list(attributes.get(uid_attribute))
    if not values or not values[0]:
        raise MissingAttributeError(uid_attribute)
    return str(values[0])


def apply_aws_attributes(attributes: AttributeMap, config: RoleMappingConfig) -> AttributeMap:
    """
    Add the AWS SAML attributes to a user's attribute set.

    RoleSessionName and SessionDuration replace any existing values. Matching
    role ARN pairs are appended to the Role attribute, which is left absent
    when no configured role matches.

    Args:
        attributes: User attribute set, updated in place
        config: Role mapping configuration

    Returns:
        The same attribute set

    Raises:
        MissingAttributeError: If the uid attribute is absent or empty
    """
    logger.debug(f"Incoming attributes: {attributes}")

    session_name = _session_name(attributes, config.uid_attribute)

    attributes[ROLE_SESSION_NAME_ATTRIBUTE] = [session_name]
    attributes[SESSION_DURATION_ATTRIBUTE] = [str(config.session_duration_seconds)]

    local_roles = collect_local_roles(attributes, config.role_attributes)
    matched_roles = match_iam_roles(local_roles, config)

    if not matched_roles:
        logger.warning(f"No IAM role matched for {session_name} (local roles: {sorted(local_roles)})")
        return attributes

    role_values = as_list(attributes.get(ROLE_ATTRIBUTE))
    role_values.extend(role_attribute_value(config, iam_role) for iam_role in matched_roles)
    attributes[ROLE_ATTRIBUTE] = role_values

    logger.info(f"Granted IAM role(s) {', '.join(matched_roles)} to {session_name}")
    logger.debug(f"Returning attributes: {attributes}")
    return attributes

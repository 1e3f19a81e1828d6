"""
AWS IAM SAML attribute mapping.

This package derives the AWS-specific SAML attributes from a user's existing
attributes so the user can federate into an AWS account:
- Role mapping configuration (config)
- Attribute transformation (transform)
- Pipeline step wrapper (step)
"""

from .config import (
    ConfigError,
    RoleGrant,
    RoleMappingConfig,
    build_role_mapping_config,
)

from .transform import (
    MissingAttributeError,
    apply_aws_attributes,
    collect_local_roles,
    match_iam_roles,
    role_attribute_value,
)

from .step import (
    SetAwsAttributes,
    TransformStep,
)

from .types import (
    AttributeMap,
    IamRoleAssignment,
)

__all__ = [
    # Configuration
    "ConfigError",
    "RoleGrant",
    "RoleMappingConfig",
    "build_role_mapping_config",
    # Transformation
    "MissingAttributeError",
    "apply_aws_attributes",
    "collect_local_roles",
    "match_iam_roles",
    "role_attribute_value",
    # Steps
    "SetAwsAttributes",
    "TransformStep",
    # Types
    "AttributeMap",
    "IamRoleAssignment",
]

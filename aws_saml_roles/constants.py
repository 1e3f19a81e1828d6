"""
Constants module for AWS SAML attribute names and filter option keys.

This module contains the attribute names IAM reads from a SAML assertion,
the option keys recognised by the SetAwsAttributes filter, and their defaults.
"""

# AWS SAML attribute names
# Reference: https://docs.aws.amazon.com/IAM/latest/UserGuide/id_roles_providers_create_saml_assertions.html
ROLE_ATTRIBUTE = "https://aws.amazon.com/SAML/Attributes/Role"
ROLE_SESSION_NAME_ATTRIBUTE = "https://aws.amazon.com/SAML/Attributes/RoleSessionName"
SESSION_DURATION_ATTRIBUTE = "https://aws.amazon.com/SAML/Attributes/SessionDuration"

# ARN formats for the Role attribute value (role ARN first, then provider ARN)
IAM_ROLE_ARN_FORMAT = "arn:aws:iam::{account_id}:role/{role_name}"
SAML_PROVIDER_ARN_FORMAT = "arn:aws:iam::{account_id}:saml-provider/{provider_name}"

# AWS ARN Regex Patterns
AWS_ACCOUNT_ID_PATTERN = r'^\d{12}$'
IAM_ROLE_ARN_PATTERN = r'^arn:aws:iam::(\d{12}):role/(.+)$'
SAML_PROVIDER_ARN_PATTERN = r'^arn:aws:iam::(\d{12}):saml-provider/(.+)$'

# Filter option keys
OPTION_UID_ATTRIBUTE = "attribute.uid"
OPTION_ROLE_ATTRIBUTES = "attribute.role"
OPTION_SESSION_DURATION = "session.duration"
OPTION_AWS_ACCOUNT = "aws.account"
OPTION_IAM_PROVIDER = "iam.provider"
OPTION_MATCH_ALL = "match.all"
OPTION_IAM_ROLES = "iam.roles"

# Defaults
DEFAULT_UID_ATTRIBUTE = "uid"
DEFAULT_ROLE_ATTRIBUTES = ("group",)
DEFAULT_SESSION_DURATION_SECONDS = 3600  # 1 hour

# IAM accepts SessionDuration values between 15 minutes and 12 hours
MIN_SESSION_DURATION_SECONDS = 900
MAX_SESSION_DURATION_SECONDS = 43200

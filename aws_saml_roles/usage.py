import argparse
import yaml
from typing import Any, Dict
from .config import RoleMappingConfig, build_role_mapping_config
from .constants import (
    OPTION_AWS_ACCOUNT,
    OPTION_IAM_PROVIDER,
    OPTION_MATCH_ALL,
    OPTION_SESSION_DURATION,
)
from .types import AttributeMap
from .utils import as_list

# CLI argument dest -> filter option key
CLI_OPTION_KEYS: Dict[str, str] = {
    "aws_account": OPTION_AWS_ACCOUNT,
    "iam_provider": OPTION_IAM_PROVIDER,
    "session_duration": OPTION_SESSION_DURATION,
    "match_all": OPTION_MATCH_ALL,
}


def load_yaml_config(path: str) -> Dict[str, Any]:
    """
    Load filter options from a YAML file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Dictionary containing the loaded options, or empty dict if file not found
    """
    try:
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"Config file '{path}' not found. Continuing without it.")
        return {}


def load_attributes(path: str) -> AttributeMap:
    """
    Load a user's attribute set from a JSON or YAML file.

    JSON documents are valid YAML, so both are read with the YAML loader.
    Scalar attribute values are normalized to one-element lists.

    Args:
        path: Path to the attributes file

    Returns:
        Attribute set mapping names to lists of string values

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a mapping
    """
    with open(path, 'r') as f:
        document = yaml.safe_load(f) or {}

    if not isinstance(document, dict):
        raise ValueError(f"Attributes file '{path}' must contain a mapping of attribute names to values")

    return {
        str(name): [str(value) for value in as_list(values)]
        for name, values in document.items()
    }


def parse_cli_args() -> argparse.Namespace:
    """
    Parse command line arguments for the aws-saml-roles tool.

    Returns:
        Parsed command line arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="aws-saml-roles",
        description="aws-saml-roles - preview the AWS SAML attributes derived for a user"
    )

    parser.add_argument(
        '--config',
        required=True,
        type=str,
        help='Path to filter options YAML'
    )
    parser.add_argument(
        '--attributes',
        required=True,
        type=str,
        help='Path to a JSON or YAML file with the user attributes'
    )

    # Filter options (override YAML if provided)
    parser.add_argument(
        '--aws-account',
        dest='aws_account',
        type=str,
        help='12-digit AWS account ID (aws.account)'
    )
    parser.add_argument(
        '--iam-provider',
        dest='iam_provider',
        type=str,
        help='Name of the SAML provider registered in IAM (iam.provider)'
    )
    parser.add_argument(
        '--session-duration',
        dest='session_duration',
        type=int,
        help='Session duration in seconds (session.duration, default 3600)'
    )
    parser.add_argument(
        '--match-all',
        dest='match_all',
        action='store_true',
        default=argparse.SUPPRESS,
        help='Grant every matching IAM role instead of only the first (match.all)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args()


def merge_configs(yaml_config: Dict[str, Any], cli_args: argparse.Namespace) -> RoleMappingConfig:
    """
    Merge YAML filter options with CLI arguments and validate the result.

    Args:
        yaml_config: Filter options loaded from YAML file
        cli_args: Parsed command line arguments

    Returns:
        Validated RoleMappingConfig object

    Raises:
        ConfigError: If configuration validation fails
    """
    # Start with YAML
    merged = yaml_config.copy()

    # Apply CLI overrides (only if CLI provided them)
    cli_options = {
        CLI_OPTION_KEYS[k]: v for k, v in vars(cli_args).items()
        if k in CLI_OPTION_KEYS and v is not None
    }
    merged.update(cli_options)

    # Validate and return final config (will raise if required options missing or invalid)
    return build_role_mapping_config(merged)

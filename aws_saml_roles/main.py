from typing import Dict, List
import argparse
import logging

from .config import ConfigError, RoleMappingConfig
from .constants import ROLE_ATTRIBUTE
from .usage import load_attributes, load_yaml_config, parse_cli_args, merge_configs
from .step import SetAwsAttributes
from .transform import MissingAttributeError
from .types import AttributeMap, IamRoleAssignment
from .output import OutputHandler

logger = logging.getLogger(__name__)


def setup_configuration(cli_args: argparse.Namespace, yaml_config: Dict) -> RoleMappingConfig:
    """
    Merge and validate configuration from YAML and CLI arguments.

    Args:
        cli_args: Parsed command line arguments
        yaml_config: Filter options loaded from YAML file

    Returns:
        Validated RoleMappingConfig object

    Raises:
        SystemExit: If configuration validation fails
    """
    try:
        final_config = merge_configs(yaml_config, cli_args)
    except ConfigError as e:
        OutputHandler.error("Configuration Error", e)
        exit(1)

    OutputHandler.success("Final Config", final_config.model_dump())

    return final_config


def granted_roles(attributes: AttributeMap) -> List[IamRoleAssignment]:
    """
    Parse the Role attribute of a transformed attribute set.

    Values that are not a role/provider ARN pair (e.g. left by an earlier
    pipeline step) are logged and skipped.

    Args:
        attributes: Attribute set after the AWS attributes were applied

    Returns:
        List of IamRoleAssignment, empty when no role was granted
    """
    assignments: List[IamRoleAssignment] = []
    for value in attributes.get(ROLE_ATTRIBUTE, []):
        try:
            assignments.append(IamRoleAssignment.from_attribute_value(value))
        except ValueError as e:
            logger.warning(f"Skipping unparseable Role value: {e}")
    return assignments


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Main entry point for previewing AWS SAML attributes."""
    cli_args = parse_cli_args()
    configure_logging(cli_args.verbose)
    yaml_config = load_yaml_config(cli_args.config)

    final_config = setup_configuration(cli_args, yaml_config)
    step = SetAwsAttributes(final_config)

    try:
        attributes = load_attributes(cli_args.attributes)
        result = step.process(attributes)
    except (FileNotFoundError, ValueError) as e:
        OutputHandler.error("Input Error", e)
        logger.error(f"Could not read attributes: {e}", exc_info=True)
        exit(1)
    except MissingAttributeError as e:
        OutputHandler.error("Missing Attribute", e)
        logger.error(f"Cannot name session: {e}")
        exit(1)

    OutputHandler.success("Attributes", result)
    OutputHandler.role_assignments(granted_roles(result))


if __name__ == "__main__":
    main()

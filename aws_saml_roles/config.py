import logging
from typing import Any, Callable, Dict, FrozenSet, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    AWS_ACCOUNT_ID_PATTERN,
    DEFAULT_ROLE_ATTRIBUTES,
    DEFAULT_SESSION_DURATION_SECONDS,
    DEFAULT_UID_ATTRIBUTE,
    MAX_SESSION_DURATION_SECONDS,
    MIN_SESSION_DURATION_SECONDS,
    OPTION_AWS_ACCOUNT,
    OPTION_IAM_PROVIDER,
    OPTION_IAM_ROLES,
    OPTION_MATCH_ALL,
    OPTION_ROLE_ATTRIBUTES,
    OPTION_SESSION_DURATION,
    OPTION_UID_ATTRIBUTE,
)
from .utils import as_list

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the filter configuration is invalid."""


class RoleGrant(BaseModel):
    """An IAM role and the local roles that grant it."""
    model_config = ConfigDict(frozen=True)

    iam_role: str = Field(min_length=1)
    local_roles: FrozenSet[str]


class RoleMappingConfig(BaseModel):
    """Immutable settings of the SetAwsAttributes filter."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    # 12-digit id of the AWS account being connected
    account_id: str = Field(pattern=AWS_ACCOUNT_ID_PATTERN)
    # Name of the SAML identity provider registration in IAM
    provider_name: str = Field(min_length=1)
    # Attribute exposed to IAM as RoleSessionName
    uid_attribute: str = Field(default=DEFAULT_UID_ATTRIBUTE, min_length=1)
    # Attributes holding local role names/ids
    role_attributes: Tuple[str, ...] = DEFAULT_ROLE_ATTRIBUTES
    # Ordered; first-match selection depends on it
    role_grants: Tuple[RoleGrant, ...] = ()
    session_duration_seconds: int = Field(
        default=DEFAULT_SESSION_DURATION_SECONDS,
        ge=MIN_SESSION_DURATION_SECONDS,
        le=MAX_SESSION_DURATION_SECONDS,
    )
    # Emit every matching role instead of only the first
    match_all: bool = False

    @property
    def role_map(self) -> Dict[str, FrozenSet[str]]:
        """Map of IAM role name to the local roles granting it, in configured order."""
        return {grant.iam_role: grant.local_roles for grant in self.role_grants}


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


def _to_str_tuple(value: Any) -> Tuple[str, ...]:
    return tuple(str(item) for item in as_list(value))


def _to_role_grants(value: Any) -> Tuple[RoleGrant, ...]:
    if not isinstance(value, Mapping):
        raise ConfigError(
            f"Config option '{OPTION_IAM_ROLES}' must map IAM role names to local roles, "
            f"got {type(value).__name__}"
        )
    return tuple(
        RoleGrant(
            iam_role=str(iam_role),
            local_roles=frozenset(str(local_role) for local_role in as_list(local_roles)),
        )
        for iam_role, local_roles in value.items()
    )


def _to_bool_input(value: Any) -> Any:
    # A blank YAML value means "not set"; everything else is parsed by pydantic
    return False if value is None else value


# Option key -> (model field, coercion). match.all is left to pydantic's bool parsing.
_OPTION_FIELDS: Dict[str, Tuple[str, Callable[[Any], Any]]] = {
    OPTION_UID_ATTRIBUTE: ("uid_attribute", _to_str),
    OPTION_ROLE_ATTRIBUTES: ("role_attributes", _to_str_tuple),
    OPTION_SESSION_DURATION: ("session_duration_seconds", int),
    OPTION_AWS_ACCOUNT: ("account_id", _to_str),
    OPTION_IAM_PROVIDER: ("provider_name", _to_str),
    OPTION_MATCH_ALL: ("match_all", _to_bool_input),
    OPTION_IAM_ROLES: ("role_grants", _to_role_grants),
}


def build_role_mapping_config(options: Mapping[str, Any]) -> RoleMappingConfig:
    """
    Build a validated RoleMappingConfig from raw filter options.

    Args:
        options: Mapping of option key (e.g. 'aws.account') to value. Values
            may be scalars where a list is expected.

    Returns:
        Immutable RoleMappingConfig

    Raises:
        ConfigError: On an unrecognized key, a missing account id or provider
            name, or a value that fails validation
    """
    fields: Dict[str, Any] = {}

    for name, value in options.items():
        if name not in _OPTION_FIELDS:
            raise ConfigError(f"unrecognized configuration key: {name!r}")

        field_name, coerce = _OPTION_FIELDS[name]
        try:
            fields[field_name] = coerce(value)
        except ConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value for config option '{name}': {value!r}") from e

    if "uid_attribute" in fields and not fields["uid_attribute"]:
        raise ConfigError(f"uid attribute name required: config option '{OPTION_UID_ATTRIBUTE}' must not be empty")

    if not fields.get("account_id"):
        raise ConfigError(f"aws account id required: config option '{OPTION_AWS_ACCOUNT}' must be set")

    if not fields.get("provider_name"):
        raise ConfigError(f"iam provider name required: config option '{OPTION_IAM_PROVIDER}' must be set")

    try:
        config = RoleMappingConfig(**fields)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e

    logger.debug(
        f"Built role mapping for account {config.account_id} with "
        f"{len(config.role_grants)} IAM role(s), match_all={config.match_all}"
    )
    return config

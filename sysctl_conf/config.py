"""Parser options and their loaders.

Responsibilities:
- Define parser behavior settings as a typed, immutable dataclass.
- Resolve settings with deterministic precedence: explicit value > environment > default.

Key types:
- `IgnoreFailurePolicy`: how `-`-marked lines that fail are handled.
- `ParserOptions`: normalized settings for one parse call.
- `OptionsLoader`: static construction helpers for `ParserOptions`.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .errors import OptionsError
from .parsing import normalize_optional_string, parse_required_choice


class IgnoreFailurePolicy(str, Enum):
    """Handling of lines carrying the leading `-` ignore-failure marker.

    `STRICT` keeps every structural error fatal, marker or not. `SKIP` drops a
    marked line whose own processing fails and continues with the next line.
    """

    STRICT = "strict"
    SKIP = "skip"

    def __str__(self) -> str:
        return self.value


_DEFAULT_ENCODING = "utf-8"
_POLICY_ENV_KEY = "SYSCTL_CONF_IGNORE_FAILURE_POLICY"
_ENCODING_ENV_KEY = "SYSCTL_CONF_ENCODING"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Settings for one parse call.

    Attributes:
        ignore_failure_policy: Handling of failing `-`-marked lines.
        encoding: Text encoding used by the file-reading wrappers.
    """

    ignore_failure_policy: IgnoreFailurePolicy = IgnoreFailurePolicy.STRICT
    encoding: str = _DEFAULT_ENCODING

    def validate(self) -> None:
        """Validate option values before they are used by the parser."""

        if not isinstance(self.ignore_failure_policy, IgnoreFailurePolicy):
            raise OptionsError(
                f"`ignore_failure_policy` must be an `IgnoreFailurePolicy`, "
                f"got `{self.ignore_failure_policy!r}`."
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise OptionsError(f"Unknown `encoding` value `{self.encoding}`.") from exc


class OptionsLoader:
    """Factory methods for creating `ParserOptions` from external sources."""

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ParserOptions:
        """Create validated options from environment variables."""

        return OptionsLoader.resolve(env=env)

    @staticmethod
    def resolve(
        *,
        ignore_failure_policy: str | None = None,
        encoding: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ParserOptions:
        """Resolve options with precedence: explicit argument > environment > default."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        policy_token = normalize_optional_string(ignore_failure_policy)
        policy_field = "ignore_failure_policy"
        if policy_token is None:
            policy_token = normalize_optional_string(env_map.get(_POLICY_ENV_KEY))
            policy_field = _POLICY_ENV_KEY

        resolved_encoding = (
            normalize_optional_string(encoding)
            or normalize_optional_string(env_map.get(_ENCODING_ENV_KEY))
            or _DEFAULT_ENCODING
        )

        policy = IgnoreFailurePolicy.STRICT
        if policy_token is not None:
            policy = OptionsLoader._parse_policy(policy_token, policy_field)

        options = ParserOptions(ignore_failure_policy=policy, encoding=resolved_encoding)
        options.validate()
        return options

    @staticmethod
    def _parse_policy(value: str, field_name: str) -> IgnoreFailurePolicy:
        """Parse an ignore-failure policy token into its enum member."""

        try:
            token = parse_required_choice(
                value, field_name, (policy.value for policy in IgnoreFailurePolicy)
            )
        except ValueError as exc:
            raise OptionsError(str(exc)) from exc
        return IgnoreFailurePolicy(token)

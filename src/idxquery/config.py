# -*- encoding: utf-8 -*-
"""
idxquery Settings.

Defaults that callers may want to change per deployment. Settings() uses
the built-in values; Settings.from_env() reads overrides from the
environment, and only callers that pass it get them:

    IDXQUERY_DEFAULT_BUCKET_TYPE   bucket type for textual queries that
                                   name only a bucket ("default")
    IDXQUERY_DEFAULT_CHARSET       encoding for string keys on binary
                                   indexes ("utf-8")
    IDXQUERY_STRICT_RAW_INTEGERS   when truthy, raw integer queries must
                                   carry decimal-digit keys (off)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BUCKET_TYPE = "default"
DEFAULT_CHARSET = "utf-8"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Immutable idxquery settings."""
    default_bucket_type: str = DEFAULT_BUCKET_TYPE
    default_charset: str = DEFAULT_CHARSET
    strict_raw_integers: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Returns:
            Settings with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        strict = env.get("IDXQUERY_STRICT_RAW_INTEGERS", "")
        return cls(
            default_bucket_type=env.get("IDXQUERY_DEFAULT_BUCKET_TYPE") or DEFAULT_BUCKET_TYPE,
            default_charset=env.get("IDXQUERY_DEFAULT_CHARSET") or DEFAULT_CHARSET,
            strict_raw_integers=strict.strip().lower() in _TRUTHY,
        )

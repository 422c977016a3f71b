"""Settings resolution with environment overrides.

flarekit has a single settings model, :class:`~flarekit.models.ErrorConfig`.
:func:`resolve_error_config` builds it with the following precedence
(high to low):

    1. Explicit arguments
    2. Environment variables (``FLAREKIT_TRACE_HEADER``,
       ``FLAREKIT_BODY_PREVIEW_CHARS``)
    3. Defaults
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import ValidationError

from flarekit.exceptions import ConfigError
from flarekit.models import ErrorConfig

ENV_TRACE_HEADER = "FLAREKIT_TRACE_HEADER"
ENV_BODY_PREVIEW_CHARS = "FLAREKIT_BODY_PREVIEW_CHARS"


def resolve_error_config(
    trace_header: Optional[str] = None,
    body_preview_chars: Optional[int] = None,
) -> ErrorConfig:
    """Resolve :class:`ErrorConfig` from arguments, environment and defaults.

    Empty environment variables are treated as unset.

    Returns:
        The effective settings.

    Raises:
        ConfigError: If a value fails validation (e.g. a negative or
            non-numeric preview length).
    """
    values: dict[str, Any] = {}

    # 2. Environment variables
    env_header = os.environ.get(ENV_TRACE_HEADER)
    if env_header:
        values["trace_header"] = env_header
    env_preview = os.environ.get(ENV_BODY_PREVIEW_CHARS)
    if env_preview:
        values["body_preview_chars"] = env_preview

    # 1. Explicit arguments
    if trace_header is not None:
        values["trace_header"] = trace_header
    if body_preview_chars is not None:
        values["body_preview_chars"] = body_preview_chars

    try:
        return ErrorConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid flarekit settings: {exc}") from exc

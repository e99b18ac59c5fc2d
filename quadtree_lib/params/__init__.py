"""Parameter presets and validation for quadtree refinement."""

from .presets import (
    default_world,
    shallow_debug,
    fine_world,
    large_world,
    get_preset,
    list_presets,
    PRESETS,
)

from .validation import (
    validate_params,
    validate_and_warn,
    check_params,
    PARAM_BOUNDS,
)

__all__ = [
    # Presets
    "default_world",
    "shallow_debug",
    "fine_world",
    "large_world",
    "get_preset",
    "list_presets",
    "PRESETS",
    # Validation
    "validate_params",
    "validate_and_warn",
    "check_params",
    "PARAM_BOUNDS",
]

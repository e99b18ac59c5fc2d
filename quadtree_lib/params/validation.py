"""Parameter validation with bounds checking.

This module provides validation for RefinementParams to catch settings that
would make the refinement loop degenerate or needlessly expensive.
"""

import logging
from typing import List, Tuple
import numpy as np
from ..core.result import OperationResult, ErrorCode
from ..ops.refine import RefinementParams, TIE_BREAK_POLICIES, REBUILD_POLICIES

logger = logging.getLogger(__name__)


PARAM_BOUNDS = {
    "world_half_length": (0.5, 1.0e6, "units"),
    "target_depth": (0, 12, "levels"),  # full rebuild is O(4^depth) in the worst case
    "min_half_length": (1.0e-6, 1.0e6, "units"),
    "speed": (0.0, 100.0, "units/step"),
}


def validate_params(params: RefinementParams) -> Tuple[bool, List[str]]:
    """
    Validate RefinementParams against bounds.

    Parameters
    ----------
    params : RefinementParams
        Parameters to validate

    Returns
    -------
    is_valid : bool
        True if all parameters are valid
    warnings : list of str
        List of validation warnings/errors
    """
    warnings = []

    for param_name, (min_val, max_val, unit) in PARAM_BOUNDS.items():
        value = getattr(params, param_name, None)

        if value is None:
            continue

        if value < min_val:
            warnings.append(
                f"{param_name} = {value} {unit} is below minimum {min_val} {unit}"
            )
        elif value > max_val:
            warnings.append(
                f"{param_name} = {value} {unit} exceeds maximum {max_val} {unit}"
            )

    if len(params.world_center) != 2 or not np.all(np.isfinite(params.world_center)):
        warnings.append(f"world_center {params.world_center} must be two finite coordinates")

    if params.tie_break not in TIE_BREAK_POLICIES:
        warnings.append(
            f"tie_break {params.tie_break!r} is not one of {', '.join(TIE_BREAK_POLICIES)}"
        )

    if params.rebuild_policy not in REBUILD_POLICIES:
        warnings.append(
            f"rebuild_policy {params.rebuild_policy!r} is not one of {', '.join(REBUILD_POLICIES)}"
        )

    if params.min_half_length > 0 and params.world_half_length > 0:
        reachable = params.reachable_depth()
        if params.target_depth > reachable:
            warnings.append(
                f"target_depth ({params.target_depth}) cannot be reached: min_half_length "
                f"({params.min_half_length}) stops subdivision at depth {reachable}"
            )

        side = 2.0 * params.world_half_length
        exponent = np.log2(side)
        if not np.isclose(exponent, np.round(exponent)):
            warnings.append(
                f"world side length ({side}) is not a power of two"
            )

    is_valid = len(warnings) == 0
    return is_valid, warnings


def validate_and_warn(params: RefinementParams) -> RefinementParams:
    """
    Validate parameters and log warnings.

    Parameters
    ----------
    params : RefinementParams
        Parameters to validate

    Returns
    -------
    params : RefinementParams
        Same parameters (for chaining)
    """
    is_valid, warnings = validate_params(params)

    if not is_valid:
        logger.warning("Parameter validation warnings (%d):", len(warnings))
        for warning in warnings:
            logger.warning("  - %s", warning)

    return params


def check_params(params: RefinementParams) -> OperationResult:
    """
    Validate parameters and report the outcome as an OperationResult.

    Each validation problem is recorded as an error with code
    ``INVALID_PARAMETER``.
    """
    is_valid, warnings = validate_params(params)
    if is_valid:
        return OperationResult.success("Parameters are valid")

    result = OperationResult.failure(f"{len(warnings)} invalid parameter(s)")
    for warning in warnings:
        result.add_error(warning, ErrorCode.INVALID_PARAMETER)
    return result

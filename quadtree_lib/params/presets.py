"""Parameter presets for common refinement setups.

Units: All spatial parameters are in world units.
"""

from ..ops.refine import RefinementParams


def default_world() -> RefinementParams:
    """
    16-unit world refined to depth 5 around the reference point.

    Characteristics:
    - Finest leaves have half-length 0.5
    - Full rebuild whenever the point leaves its cell
    """
    return RefinementParams(
        world_center=(0.0, 0.0),
        world_half_length=16.0,
        target_depth=5,
        min_half_length=0.5,
        tie_break="canonical",
        rebuild_policy="full",
        speed=0.025,
    )


def shallow_debug() -> RefinementParams:
    """
    Coarse tree for quick visual debugging.

    Characteristics:
    - Only three levels, so leaves are large and rebuilds are rare
    - Enumeration-order tie-break to reproduce legacy behaviour
    """
    return RefinementParams(
        world_center=(0.0, 0.0),
        world_half_length=16.0,
        target_depth=3,
        min_half_length=0.5,
        tie_break="enumeration",
        rebuild_policy="full",
        speed=0.25,
    )


def fine_world() -> RefinementParams:
    """
    Deep refinement of the default world using incremental regrowth.
    """
    return RefinementParams(
        world_center=(0.0, 0.0),
        world_half_length=16.0,
        target_depth=7,
        min_half_length=0.125,
        tie_break="canonical",
        rebuild_policy="incremental",
        speed=0.025,
    )


def large_world() -> RefinementParams:
    """
    1024-unit world with faster movement.
    """
    return RefinementParams(
        world_center=(0.0, 0.0),
        world_half_length=1024.0,
        target_depth=6,
        min_half_length=1.0,
        tie_break="canonical",
        rebuild_policy="incremental",
        speed=2.0,
    )


PRESETS = {
    "default_world": default_world,
    "shallow_debug": shallow_debug,
    "fine_world": fine_world,
    "large_world": large_world,
}


def get_preset(name: str) -> RefinementParams:
    """
    Get a parameter preset by name.

    Parameters
    ----------
    name : str
        Preset name (e.g., "default_world", "shallow_debug")

    Returns
    -------
    RefinementParams
        Parameter configuration

    Raises
    ------
    ValueError
        If preset name is not recognized
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")

    return PRESETS[name]()


def list_presets() -> list:
    """List all available preset names."""
    return list(PRESETS.keys())

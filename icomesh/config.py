"""
Configuration defaults
======================
Central registry of the constants the scene driver and CLI start from.
Constructor keyword arguments and CLI flags override them.
"""

# Mesh selection
DEFAULT_SHAPE: str = "icosphere"
DEFAULT_QUALITY: int = 3

# Projection
DEFAULT_FOV: float = 40.0
DEFAULT_ASPECT: float = 1.0
DEFAULT_Z_NEAR: float = 1.0
DEFAULT_Z_FAR: float = 100.0

# The camera sits this far back along -Z
DEFAULT_CAMERA_DISTANCE: float = 2.0

# Radians per millisecond about X and Y
DEFAULT_SPIN_RATES: tuple[float, float] = (1e-4, 5e-5)

# Rotation axes shorter than this are rejected
AXIS_EPSILON: float = 1e-6

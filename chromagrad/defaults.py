"""Central place for chromagrad default settings."""
import math

# Sampling density: fraction of device pixels along the gradient axis that
# receive their own color sample.
DEFAULT_LINEAR_DENSITY: float = 0.075
DEFAULT_RADIAL_DENSITY: float = 0.125
DEFAULT_SWEEP_DENSITY: float = 0.075

# Device pixels per logical pixel when the caller does not supply one.
DEFAULT_DEVICE_PIXEL_RATIO: float = 1.0

# Geometry defaults
DEFAULT_RADIAL_RADIUS: float = 0.5
DEFAULT_FOCAL_RADIUS: float = 0.0
DEFAULT_SWEEP_START_ANGLE: float = 0.0
DEFAULT_SWEEP_END_ANGLE: float = 2.0 * math.pi
FULL_TURN: float = 2.0 * math.pi

# Hue channels interpolate along the shorter arc between the two hues.
HUE_360: float = 360.0

# sRGB / D65 reference white, XYZ scaled so that Y = 100.
D65_WHITE: tuple[float, float, float] = (95.047, 100.0, 108.883)

# Luma weights of the HSP color model.
HSP_WEIGHTS: tuple[float, float, float] = (0.299, 0.587, 0.114)

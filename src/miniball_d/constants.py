"""Numerical tolerances used by the basis and the engine.

Kept in one module so they can be tuned together; `MiniballConfig` takes its
defaults from here.
"""

# Basis extension is rejected if 2*|v_m|^2 <= EPS_PUSH * current squared radius
EPS_PUSH: float = 1e-32

# ... or if |v_m|^2 <= EPS_DEPENDENT * |p - q0|^2 (v_m: p - q0 after projection)
EPS_DEPENDENT: float = 1e-20

# Excess (relative to the squared extent of the points around the first one) still counted as inside
EPS_EXCESS: float = 1e-14

# Default relative accuracy accepted by Miniball.is_valid()
EPS_VALID: float = 1e-15

# Squared radius reported for the empty ball
EMPTY_SQUARED_RADIUS: float = -1.0

__all__ = [
    'EPS_PUSH',
    'EPS_DEPENDENT',
    'EPS_EXCESS',
    'EPS_VALID',
    'EMPTY_SQUARED_RADIUS',
]

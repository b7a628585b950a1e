"""Configuration for the smallest-enclosing-ball engine."""
from dataclasses import dataclass, field

from miniball_d.constants import EPS_PUSH, EPS_DEPENDENT, EPS_EXCESS, EPS_VALID


@dataclass
class MiniballConfig:
    '''
    Tunable parameters of a Miniball computation.

    Inputs:
        - pivoting (bool):              (OPTIONAL - default: True) Build with the pivoting variant instead of plain move-to-front
        - push_epsilon (float):         (OPTIONAL - default: EPS_PUSH) Threshold, relative to the current squared radius, below which a new basis direction is rejected
        - dependency_epsilon (float):   (OPTIONAL - default: EPS_DEPENDENT) Threshold, relative to the point's squared offset from the first basis point, below which the point counts as affinely dependent
        - excess_tolerance (float):     (OPTIONAL - default: EPS_EXCESS) Relative excess (scaled by the largest squared distance of a point to the first checked-in point) still treated as inside the ball
        - validity_tolerance (float):   (OPTIONAL - default: EPS_VALID) Default tolerance of 'is_valid()'
    '''
    pivoting: bool = field(default=True)
    push_epsilon: float = field(default=EPS_PUSH)
    dependency_epsilon: float = field(default=EPS_DEPENDENT)
    excess_tolerance: float = field(default=EPS_EXCESS)
    validity_tolerance: float = field(default=EPS_VALID)

    def __post_init__(self):
        for name in ('push_epsilon', 'dependency_epsilon', 'excess_tolerance', 'validity_tolerance'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)):
                raise TypeError(f"Expected '{name}' to be a float, but got '{type(value).__name__}' instead.")
            if value < 0:
                raise ValueError(f"ERROR in 'MiniballConfig': '{name}' must be non-negative, got {value}")
            setattr(self, name, float(value))
        self.pivoting = bool(self.pivoting)


__all__ = ['MiniballConfig']

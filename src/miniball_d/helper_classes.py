import numpy as np
from dataclasses import dataclass, field


# Helper class for a ball in arbitrary dimension
@dataclass
class Ball:
    '''
    Ball given by its center and squared radius. The dimension is the length of the center.
    '''
    center: np.ndarray = field()
    squared_radius: float = field()

    def __post_init__(self):
        # Ensure that center is a numpy array
        if not (isinstance(self.center, np.ndarray) or isinstance(self.center, list) or isinstance(self.center, tuple)):
            raise TypeError(f"Expected 'center' to be a list, tuple or numpy array, but got '{type(self.center).__name__}' instead.")
        self.center = np.array(self.center, dtype=float)

        # Ensure that center is a vector
        if self.center.ndim != 1:
            if self.center.ndim == 2 and self.center.shape[0] == 1:
                self.center = self.center.reshape(-1,)
            else:
                raise ValueError(f"Expected 'center' to be a vector, but got a numpy array of shape {self.center.shape} instead.")

        # Ensure that the squared radius is a non-negative float
        if not isinstance(self.squared_radius, (int, float, np.floating, np.integer)):
            raise TypeError(f"Expected 'squared_radius' to be a float, but got '{type(self.squared_radius).__name__}' instead.")
        elif self.squared_radius < 0:
            raise ValueError("Squared radius must be non-negative.")
        self.squared_radius = float(self.squared_radius)

    @property
    def dimension(self) -> int:
        return self.center.shape[0]

    @property
    def radius(self) -> float:
        return float(np.sqrt(self.squared_radius))

    def contains(self, point: np.ndarray, tol: float = 0.0) -> bool:
        """Check if a point is inside the ball, allowing an absolute slack 'tol' on the squared radius"""
        diff = np.asarray(point, dtype=float) - self.center
        return float(np.dot(diff, diff)) <= self.squared_radius + tol

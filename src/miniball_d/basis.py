import numpy as np

from miniball_d.constants import EPS_PUSH, EPS_DEPENDENT, EMPTY_SQUARED_RADIUS
from miniball_d.logging_utils import get_logger

log = get_logger('miniball_d.basis')


class Basis:
    '''
    Affinely independent set of up to d+1 points together with the smallest ball having all of them on its boundary.

    The first point q0 is stored as is; every further point is stored as an orthogonalized direction v_m (Gram-Schmidt against
    the previous directions, relative to q0). The centers c[m] and squared radii sqr_r[m] of the balls through the first m+1 points
    are updated in closed form from v_m, so no linear system is ever solved. All storage is allocated once with capacity d+1 and
    addressed through the current size m.

    Inputs:
        - d (int):                    Dimension of the ambient space
        - push_epsilon (float):       (OPTIONAL - default: EPS_PUSH) A point is rejected if 2*|v_m|^2 <= push_epsilon * current squared radius
        - dependency_epsilon (float): (OPTIONAL - default: EPS_DEPENDENT) A point p is rejected as affinely dependent if |v_m|^2 <= dependency_epsilon * |p - q0|^2
    '''

    def __init__(self, d: int, push_epsilon: float = EPS_PUSH, dependency_epsilon: float = EPS_DEPENDENT):
        if d < 0:
            raise ValueError(f"ERROR in 'Basis()': Dimension must be non-negative, got {d}")
        self.d = d
        self.push_epsilon = push_epsilon
        self.dependency_epsilon = dependency_epsilon

        self._q0 = np.zeros(d)              # first point
        self._z = np.zeros(d + 1)           # 2*|v_m|^2
        self._f = np.zeros(d + 1)           # step factors: c[m] = c[m-1] + f[m]*v[m]
        self._v = np.zeros((d + 1, d))      # orthogonalized directions
        self._a = np.zeros((d + 1, d + 1))  # projection coefficients of Q_m onto v_i
        self._c = np.zeros((d + 1, d))      # centers
        self._sqr_r = np.zeros(d + 1)       # squared radii

        self.reset()

    def reset(self):
        '''
        Empties the basis. The empty ball has the origin as center and squared radius -1, i.e. every point lies outside of it.
        '''
        self._m = 0
        self._s = 0
        self._c[0] = 0.0
        self._current = 0
        self._current_sqr_r = EMPTY_SQUARED_RADIUS

    def center(self) -> np.ndarray:
        # Read-only view, the engine copies before handing it out
        c = self._c[self._current].view()
        c.flags.writeable = False
        return c

    def squared_radius(self) -> float:
        return float(self._current_sqr_r)

    def size(self) -> int:
        return self._m

    def support_size(self) -> int:
        return self._s

    def is_full(self) -> bool:
        return self._m == self.d + 1

    def excess(self, point: np.ndarray) -> float:
        """Squared distance of 'point' to the current center minus the current squared radius"""
        diff = point - self._c[self._current]
        return float(np.dot(diff, diff)) - self._current_sqr_r

    def add(self, point: np.ndarray) -> bool:
        '''
        Tries to extend the basis by 'point' and, on success, makes the ball through all basis points the current ball.

        Inputs:
            - point (np.ndarray):   Point with d coordinates

        Outputs:
            - added (bool):         False if the point is (numerically) affinely dependent on the basis or the basis is full, True otherwise
        '''
        m = self._m
        if m == self.d + 1:
            return False

        if m == 0:
            self._q0[:] = point
            self._c[0] = point
            self._sqr_r[0] = 0.0
        else:
            # Q_m = p - q0, projected onto the previous directions
            v = point - self._q0
            offset = 2.0 * float(np.dot(v, v))
            a = 2.0 * (self._v[1:m] @ v) / self._z[1:m]
            self._a[m, 1:m] = a
            v = v - a @ self._v[1:m]
            self._v[m] = v

            z = 2.0 * float(np.dot(v, v))
            self._z[m] = z
            if z <= self.push_epsilon * self._current_sqr_r or z <= self.dependency_epsilon * offset:
                log.debug("Rejected affinely dependent point at basis size %d (z=%g)", m, z)
                return False

            diff = point - self._c[m - 1]
            e = float(np.dot(diff, diff)) - self._sqr_r[m - 1]
            f = e / z
            self._f[m] = f
            self._c[m] = self._c[m - 1] + f * v
            self._sqr_r[m] = self._sqr_r[m - 1] + e * f / 2.0

        self._current = m
        self._current_sqr_r = self._sqr_r[m]
        self._m = m + 1
        self._s = self._m
        return True

    def pop(self):
        '''
        Removes the most recently added point. The next 'add()' extends the ball of the remaining points; the current ball
        (center and squared radius) stays the last one computed.
        '''
        if self._m == 0:
            raise AssertionError("ERROR in 'pop()': Basis is empty - should not happen")
        self._m -= 1

    def coefficients(self) -> np.ndarray:
        '''
        Coefficients of the current center as an affine combination of the support points (in the order they were added).

        Outputs:
            - lambdas (np.ndarray): Vector of length support_size() summing up to 1
        '''
        s = self._s
        lambdas = np.zeros(s)
        if s == 0:
            return lambdas
        lambdas[0] = 1.0
        for i in range(s - 1, 0, -1):
            lambdas[i] = self._f[i] - np.dot(self._a[i + 1:s, i], lambdas[i + 1:s])
            lambdas[0] -= lambdas[i]
        return lambdas

    def slack(self) -> float:
        '''
        Absolute value of the most negative affine coefficient of the center. 0 if the center is a convex combination of
        the support points, which certifies that the current ball is the smallest one enclosing them.
        '''
        lambdas = self.coefficients()
        if lambdas.size == 0:
            return 0.0
        return max(0.0, -float(lambdas.min()))

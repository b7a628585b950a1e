import numpy as np
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from miniball_d.basis import Basis
from miniball_d.config import MiniballConfig
from miniball_d.helper_classes import Ball
from miniball_d.logging_utils import get_logger

log = get_logger('miniball_d.miniball')


@dataclass
class _Frame:
    '''
    One level of the move-to-front recursion: scans the points before 'end'. 'pending' is the index of the point that was
    pushed onto the basis for the nested level and still has to be popped and moved to the front.
    '''
    end: int = field()
    next: int = field(default=0)
    pending: Optional[int] = field(default=None)


class Miniball:
    '''
    Smallest enclosing ball of a finite point set in dimension d.

    Points are first checked in one at a time with 'check_in()'. A single call to 'build()' then runs the incremental
    move-to-front algorithm (optionally with pivoting) and from there on the ball can be queried: 'center()', 'squared_radius()',
    'support_points()', 'accuracy()' and 'is_valid()'. No points can be checked in after 'build()'.

    The recursion of the algorithm is run on an explicit stack whose depth never exceeds d+1, the maximum size of the basis.

    Inputs:
        - d (int):                  Dimension of the points
        - config (MiniballConfig):  (OPTIONAL - default: MiniballConfig()) Tolerances and build variant
    '''

    def __init__(self, d: int, config: MiniballConfig = None):
        if isinstance(d, bool) or not isinstance(d, (int, np.integer)):
            raise TypeError(f"Expected 'd' to be an int, but got '{type(d).__name__}' instead.")
        if d < 0:
            raise ValueError(f"ERROR in 'Miniball()': Dimension must be non-negative, got {d}")
        self.d = int(d)
        self.config = config if config is not None else MiniballConfig()

        self._points: List[np.ndarray] = []    # scan order, reordered by move-to-front
        self._basis = Basis(self.d, self.config.push_epsilon, self.config.dependency_epsilon)
        self._support_end = 0                   # support points are self._points[:self._support_end]
        self._sqr_extent = 0.0                  # largest squared distance of a checked-in point to the first one
        self._threshold = 0.0                   # excess above which a point counts as outside
        self._built = False

    # Helper functions
    def _require_built(self, fn_name: str):
        if not self._built:
            raise AssertionError(f"ERROR in '{fn_name}()': Ball has not been built yet - call 'build()' first")

    def _is_outside(self, point: np.ndarray) -> bool:
        return self._basis.excess(point) > self._threshold

    def _move_to_front(self, j: int):
        # The element at the support boundary (or any after it) gains a predecessor
        if j >= self._support_end:
            self._support_end += 1
        self._points.insert(0, self._points.pop(j))

    def _mtf_mb(self, end: int):
        '''
        Move-to-front algorithm over the points before index 'end', starting from the current basis. Every point found outside
        of the current ball is pushed onto the basis, the ball of the points before it is recomputed with that point on the
        boundary, and the point is moved to the front.
        '''
        basis = self._basis
        self._support_end = 0
        if basis.is_full():
            return

        stack = [_Frame(end)]
        while stack:
            frame = stack[-1]
            if frame.pending is not None:
                basis.pop()
                self._move_to_front(frame.pending)
                frame.pending = None

            if frame.next >= frame.end:
                stack.pop()
                continue

            j = frame.next
            frame.next += 1
            point = self._points[j]
            if self._is_outside(point) and basis.add(point):
                frame.pending = j
                self._support_end = 0
                if not basis.is_full():
                    stack.append(_Frame(j))

    def _max_excess(self, t: int, end: int) -> Optional[int]:
        """Index in [t, end) of the first point with maximum excess above the threshold, None if there is no such point"""
        if t >= end:
            return None
        pts = np.asarray(self._points[t:end])
        diff = pts - self._basis.center()
        excess = np.einsum('ij,ij->i', diff, diff) - self._basis.squared_radius()
        k = int(np.argmax(excess))
        if excess[k] > self._threshold:
            return t + k
        return None

    def _pivot_mb(self, end: int):
        '''
        Pivoting variant: after an initial move-to-front pass, the point violating the current ball the most is made the first
        basis point and the ball is recomputed over the support points only. Repeats while the squared radius grows.
        '''
        basis = self._basis
        t = 1
        self._mtf_mb(t)
        while True:
            pivot = self._max_excess(t, end)
            if pivot is None:
                break

            t = self._support_end
            if t == pivot:
                t += 1
            old_sqr_r = basis.squared_radius()
            if not basis.add(self._points[pivot]):
                raise AssertionError("ERROR in '_pivot_mb()': Pivot could not be pushed onto an empty basis - should not happen")
            self._mtf_mb(self._support_end)
            basis.pop()
            self._move_to_front(pivot)
            if pivot > t:
                t += 1

            if not basis.squared_radius() > old_sqr_r:
                break

    # Accumulating
    def check_in(self, point: Union[np.ndarray, Sequence[float]]):
        '''
        Adds a point to the point set. No ball is computed here. Can not be called after 'build()'.

        Inputs:
            - point (np.ndarray | list | tuple):    Point with exactly d finite coordinates
        '''
        if self._built:
            raise AssertionError("ERROR in 'check_in()': Ball has already been built - no further points can be checked in")
        try:
            p = np.array(point, dtype=float)
        except (TypeError, ValueError) as err:
            raise TypeError(f"ERROR in 'check_in()': Point coordinates must be numbers, got {point!r}") from err
        if p.ndim != 1 or p.shape[0] != self.d:
            raise ValueError(f"ERROR in 'check_in()': Expected a point with {self.d} coordinates, but got shape {p.shape} instead")
        if not np.all(np.isfinite(p)):
            raise ValueError(f"ERROR in 'check_in()': Point coordinates must be finite, got {p}")

        p.setflags(write=False)
        self._points.append(p)
        diff = p - self._points[0]
        self._sqr_extent = max(self._sqr_extent, float(np.dot(diff, diff)))

    def check_in_all(self, points):
        """Checks in every point of an iterable of points or of an (N, d) array"""
        for point in points:
            self.check_in(point)

    def build(self):
        '''
        Computes the smallest enclosing ball of all checked-in points. Calling it again afterwards keeps the existing ball.
        '''
        if self._built:
            log.debug("'build()' called again - keeping the existing ball")
            return

        n = len(self._points)
        # Scaled by the spread of the points, not by their distance to the origin
        self._threshold = self.config.excess_tolerance * self._sqr_extent
        self._basis.reset()
        self._support_end = 0
        log.debug("Building ball of %d points in dimension %d (pivoting=%s)", n, self.d, self.config.pivoting)

        if n == 0:
            log.warning("'build()' called without any points - the ball is undefined")
        elif self.config.pivoting:
            self._pivot_mb(n)
        else:
            self._mtf_mb(n)

        self._built = True
        log.debug("Ball built: squared radius %g, %d support points", self._basis.squared_radius(), self._basis.support_size())

    # Queries
    @property
    def is_built(self) -> bool:
        return self._built

    def is_empty(self) -> bool:
        """True if the ball is undefined because no point was checked in"""
        self._require_built('is_empty')
        return self._basis.squared_radius() < 0

    def nr_points(self) -> int:
        return len(self._points)

    def points(self) -> Iterator[np.ndarray]:
        """All checked-in points, in their current scan order"""
        return iter(list(self._points))

    def center(self) -> np.ndarray:
        self._require_built('center')
        return np.array(self._basis.center())

    def squared_radius(self) -> float:
        self._require_built('squared_radius')
        return self._basis.squared_radius()

    def ball(self) -> Optional[Ball]:
        '''
        Outputs:
            - ball (Ball):  Center and squared radius of the computed ball, None if the ball is undefined
        '''
        self._require_built('ball')
        if self.is_empty():
            return None
        return Ball(self.center(), self.squared_radius())

    def nr_support_points(self) -> int:
        self._require_built('nr_support_points')
        return self._basis.support_size()

    def support_points(self) -> Iterator[np.ndarray]:
        '''
        Iterates over the points determining the ball, at most d+1 of them. Each call starts a new iteration.
        '''
        self._require_built('support_points')
        return iter(self._points[:self._support_end])

    def accuracy(self) -> Tuple[float, float]:
        '''
        Certificate for the computed ball, recomputed from all checked-in points.

        Outputs:
            - relative_accuracy (float):    Maximum of |excess| over the support points and of the excess over all other points,
                                            divided by the squared radius. Ideally 0.
            - slack (float):                Optimality slack: absolute value of the most negative affine coefficient of the center
                                            w.r.t. the support points. 0 if the ball is provably the smallest one.
        '''
        self._require_built('accuracy')
        if self.is_empty():
            return 0.0, 0.0

        n_supp = self._support_end
        if n_supp != self._basis.support_size():
            raise AssertionError("ERROR in 'accuracy()': Support boundary and basis size disagree - should not happen")

        sqr_r = self._basis.squared_radius()
        diff = np.asarray(self._points) - self._basis.center()
        excess = np.einsum('ij,ij->i', diff, diff) - sqr_r

        max_e = 0.0
        if n_supp > 0:
            max_e = max(max_e, float(np.max(np.abs(excess[:n_supp]))))
        if n_supp < len(self._points):
            max_e = max(max_e, float(np.max(excess[n_supp:])))

        if sqr_r > 0:
            relative_accuracy = max_e / sqr_r
        else:
            relative_accuracy = 0.0 if max_e == 0 else float('inf')
        return relative_accuracy, self._basis.slack()

    def is_valid(self, tolerance: float = None) -> bool:
        '''
        Checks the certificate of 'accuracy()'. Can be False even though the ball is acceptable in practice, since the default
        tolerance is close to machine precision and the slack has to be exactly 0.

        Inputs:
            - tolerance (float):    (OPTIONAL - default: config.validity_tolerance) Maximum relative accuracy accepted

        Outputs:
            - valid (bool):         True if the relative accuracy is below 'tolerance' and the slack is 0, False otherwise (also for an undefined ball)
        '''
        self._require_built('is_valid')
        if tolerance is None:
            tolerance = self.config.validity_tolerance
        if self.is_empty():
            return False
        relative_accuracy, slack = self.accuracy()
        return relative_accuracy < tolerance and slack == 0

    def __repr__(self) -> str:
        if not self._built:
            return f"Miniball(d={self.d}, points={self.nr_points()}, built=False)"
        return f"Miniball(d={self.d}, points={self.nr_points()}, squared_radius={self.squared_radius()}, support={self.nr_support_points()})"


def smallest_enclosing_ball(points, config: MiniballConfig = None) -> Ball:
    '''
    Computes the smallest enclosing ball of a non-empty set of points of equal dimension.

    Inputs:
        - points (list | np.ndarray):   List of points (lists, tuples or numpy arrays) or an (N, d) array
        - config (MiniballConfig):      (OPTIONAL - default: MiniballConfig()) Tolerances and build variant

    Outputs:
        - ball (Ball):                  The smallest enclosing ball
    '''
    # Check input type and size
    if not isinstance(points, (list, tuple, np.ndarray)):
        raise TypeError(f"Expected 'points' to be a list, tuple or numpy array, but got '{type(points).__name__}' instead.")
    if len(points) == 0:
        raise ValueError("Input points must not be empty")

    first = np.asarray(points[0], dtype=float)
    if first.ndim != 1:
        raise ValueError(f"Each point must be a vector, but got shape {first.shape} for the first point")

    mb = Miniball(first.shape[0], config)
    mb.check_in_all(points)
    mb.build()
    return mb.ball()

import numpy as np
import matplotlib.pyplot as plt

from miniball_d.helper_classes import Ball


def plot_ball(points, ball: Ball, ax=None, show: bool = False):
    '''
    Plots 2D points together with their enclosing ball.

    Inputs:
        - points (list | np.ndarray):   Points with 2 coordinates each
        - ball (Ball):                  Ball with a 2D center
        - ax (matplotlib Axes):         (OPTIONAL - default: None) Axes to draw into - a new figure is created if None
        - show (bool):                  (OPTIONAL - default: False) If True, 'plt.show()' is called at the end

    Outputs:
        - ax (matplotlib Axes):         The axes drawn into
    '''
    pts = np.asarray(points, dtype=float)
    if ball.dimension != 2 or pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"ERROR in 'plot_ball()': Only 2D balls and points can be plotted, got a {ball.dimension}D ball and points of shape {pts.shape}")

    if ax is None:
        fig, ax = plt.subplots()

    # Plot the points
    ax.scatter(pts[:, 0], pts[:, 1], label='Points')

    # Plot the circle
    theta = np.linspace(0, 2*np.pi, 200)
    ax.plot(ball.center[0] + ball.radius*np.cos(theta), ball.center[1] + ball.radius*np.sin(theta), 'b', label='Smallest enclosing ball')
    ax.plot(ball.center[0], ball.center[1], 'b+')

    # Set the aspect of the plot to be equal
    ax.set_aspect('equal', adjustable='datalim')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend()

    if show:
        plt.show()
    return ax

"""
Plotting helpers for spanwise distributions and performance curves
"""

from .plotting import plot_spanwise_loads, plot_performance_curve

__all__ = [
    'plot_spanwise_loads',
    'plot_performance_curve',
]

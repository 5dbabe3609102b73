"""Cubic Bezier curves evaluated in matrix form."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["BezierCurve"]


class BezierCurve:
    """A cubic Bezier curve evaluator using the standard basis matrix."""

    def __init__(self) -> None:
        columns = [
            (-1.0, 3.0, -3.0, 1.0),
            (3.0, -6.0, 3.0, 0.0),
            (-3.0, 3.0, 0.0, 0.0),
            (1.0, 0.0, 0.0, 0.0),
        ]
        self.basis = np.array(columns, dtype=float).T

    def evaluate(self, control_points: Sequence[Sequence[float]] | np.ndarray, t: float) -> np.ndarray:
        """Return the point at parameter ``t`` for four control points."""
        points = np.asarray(control_points, dtype=float)
        if points.ndim != 2 or points.shape[0] != 4:
            raise ValueError(f"expected four control points, got shape {points.shape}")
        params = np.array([t**3, t**2, t, 1.0])
        return params @ self.basis @ points
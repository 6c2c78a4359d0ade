"""
Angle Calculator Service

Geometry primitives for archery form analysis.
Angles are returned in degrees.

This is pure mathematics - no external dependencies except numpy.
"""

import math
from typing import Tuple

import numpy as np

from ..domain.pose import PoseLandmark


class AngleCalculator:
    """
    Calculates angles and distances between 2D pose landmarks.

    All methods are static - no state needed. Callers are expected to have
    checked that every landmark passed in is present.
    """

    # -------------------------------------------------------------------------
    # Core Angle Calculations
    # -------------------------------------------------------------------------

    @staticmethod
    def calculate_angle(
        p1: PoseLandmark,
        p2: PoseLandmark,  # Vertex point
        p3: PoseLandmark
    ) -> float:
        """
        Calculate angle at p2 formed by p1-p2-p3.

        Args:
            p1: Proximal point (e.g. shoulder)
            p2: Vertex point (where angle is measured)
            p3: Distal point (e.g. wrist)

        Returns:
            Angle in degrees (0-180). Defined as 0 when p1 or p3
            coincides with the vertex.

        Example:
            For elbow angle: shoulder -> elbow -> wrist
            angle = calculate_angle(shoulder, elbow, wrist)
        """
        # Vector from p2 to p1
        v1 = np.array([p1.x - p2.x, p1.y - p2.y], dtype=float)

        # Vector from p2 to p3
        v2 = np.array([p3.x - p2.x, p3.y - p2.y], dtype=float)

        norm1 = np.linalg.norm(v1)
        norm2 = np.linalg.norm(v2)
        if norm1 == 0 or norm2 == 0:
            return 0.0

        cos_angle = np.dot(v1, v2) / (norm1 * norm2)

        # Clamp to valid range (handles floating point errors)
        cos_angle = np.clip(cos_angle, -1.0, 1.0)

        return float(np.degrees(np.arccos(cos_angle)))

    @staticmethod
    def calculate_line_tilt(start: PoseLandmark, end: PoseLandmark) -> float:
        """
        Signed angle of the line start -> end from the +x axis.

        Returns:
            Angle in degrees (-180 to 180). 0 means end is level with
            and to the right of start.
        """
        return math.degrees(math.atan2(end.y - start.y, end.x - start.x))

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def calculate_distance(p1: PoseLandmark, p2: PoseLandmark) -> float:
        """Calculate 2D distance between two landmarks."""
        return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)

    @staticmethod
    def calculate_midpoint(
        p1: PoseLandmark,
        p2: PoseLandmark
    ) -> Tuple[float, float]:
        """Calculate midpoint between two landmarks."""
        return ((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)

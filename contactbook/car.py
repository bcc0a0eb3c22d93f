"""A remote-controlled car that drives around a plane."""

from __future__ import annotations

import math
from typing import NamedTuple

__all__ = ["Rect", "Car", "TICK_INTERVAL_MS"]

TICK_INTERVAL_MS = 1000 // 33
_AXEL_DISTANCE = 54.0
_MAX_SPEED = 10
_MAX_WHEELS_ANGLE = 30
_WHEELS_STEP = 5


class Rect(NamedTuple):
    """An axis-aligned rectangle in the car's own coordinates."""

    x: float
    y: float
    width: float
    height: float


class Car:
    """A car with a speed and a wheel angle, moved one tick at a time.

    The car's pose is ``x``, ``y`` (y grows downwards) and ``heading`` in
    degrees, clockwise from straight up. A positive speed drives forward.
    """

    def __init__(self) -> None:
        self.color = "green"
        self.wheels_angle = 0
        self.speed = 0
        self.x = 0.0
        self.y = 0.0
        self.heading = 0.0

    def bounding_rect(self) -> Rect:
        """The area the car covers, in its own coordinates."""
        return Rect(-35, -81, 70, 115)

    def accelerate(self) -> None:
        if self.speed < _MAX_SPEED:
            self.speed += 1

    def decelerate(self) -> None:
        if self.speed > -_MAX_SPEED:
            self.speed -= 1

    def turn_left(self) -> None:
        if self.wheels_angle > -_MAX_WHEELS_ANGLE:
            self.wheels_angle -= _WHEELS_STEP

    def turn_right(self) -> None:
        if self.wheels_angle < _MAX_WHEELS_ANGLE:
            self.wheels_angle += _WHEELS_STEP

    def step(self) -> None:
        """Advance the car by one timer tick: turn, then move along its axis."""
        wheels_rads = math.radians(self.wheels_angle)
        turn_distance = math.cos(wheels_rads) * _AXEL_DISTANCE * 2
        turn_rate = math.degrees(wheels_rads / turn_distance)  # rough estimate
        self.heading += self.speed * turn_rate

        heading_rads = math.radians(self.heading)
        self.x += self.speed * math.sin(heading_rads)
        self.y -= self.speed * math.cos(heading_rads)
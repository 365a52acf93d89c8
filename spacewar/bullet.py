"""Projectiles fired by the ships, and the rectangle type used for hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import pygame

BULLET_SCALE = 0.025
DEFAULT_BULLET_SIZE = (12.0, 12.0)
BULLET_COLOR = (255, 220, 90)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with floating point coordinates."""

    left: float
    top: float
    width: float
    height: float

    @classmethod
    def around(cls, center, size, rotation=0.0):
        """Bounding box of a rectangle of ``size`` centred on ``center`` and rotated by ``rotation`` degrees."""
        cx, cy = center
        half_w, half_h = size[0] / 2.0, size[1] / 2.0
        rad = math.radians(rotation)
        cos_a, sin_a = abs(math.cos(rad)), abs(math.sin(rad))
        extent_x = half_w * cos_a + half_h * sin_a
        extent_y = half_w * sin_a + half_h * cos_a
        return cls(cx - extent_x, cy - extent_y, 2.0 * extent_x, 2.0 * extent_y)

    def right(self):
        return self.left + self.width

    def bottom(self):
        return self.top + self.height

    def intersects(self, other):
        """True when the two rectangles overlap by a non-zero area."""
        left = max(self.left, other.left)
        right = min(self.right(), other.right())
        top = max(self.top, other.top)
        bottom = min(self.bottom(), other.bottom())
        return left < right and top < bottom


@dataclass
class Bullet:
    """A projectile travelling in a straight line at constant speed."""

    x: float
    y: float
    dx: float
    dy: float
    speed: float
    owner: int
    image: pygame.Surface | None = None
    rotation: float = 0.0
    size: tuple[float, float] = field(init=False)

    def __post_init__(self):
        if self.image is None:
            self.size = DEFAULT_BULLET_SIZE
            return
        width, height = self.image.get_size()
        self.size = (width * BULLET_SCALE, height * BULLET_SCALE)
        scaled = (max(1, round(self.size[0])), max(1, round(self.size[1])))
        self.image = pygame.transform.scale(self.image, scaled)

    @property
    def position(self):
        return (self.x, self.y)

    def bounds(self):
        """Global bounding box of the bullet."""
        return Rect.around(self.position, self.size, self.rotation)

    def update(self):
        """Advance one step along the direction and face the direction of travel."""
        self.x += self.speed * self.dx
        self.y += self.speed * self.dy
        self.rotation = math.degrees(math.atan2(self.dy, self.dx)) + 90.0

    def render(self, surface):
        if self.image is None:
            radius = max(1, round(min(self.size) / 2.0))
            pygame.draw.circle(surface, BULLET_COLOR, (round(self.x), round(self.y)), radius)
            return
        rotated = pygame.transform.rotate(self.image, -self.rotation)
        surface.blit(rotated, rotated.get_rect(center=(round(self.x), round(self.y))))
"""Player ships: movement, physics, health, firing cooldown and explosion."""

from __future__ import annotations

import math

import pygame

from spacewar.bullet import Rect

SHIP_SCALE = 0.25
DEFAULT_SHIP_SIZE = (60.0, 60.0)
SHIP_TARGET_COLOR = (246, 172, 109)
EXPLOSION_COLOR = (255, 140, 0)

HP_MAX = 10
ATTACK_COOLDOWN_MAX = 20.0
ATTACK_COOLDOWN_STEP = 0.5
BACKWARD_SPEED = 2.0
ROTATE_SPEED = 2.5

VELOCITY_MAX = 3.0
VELOCITY_MIN = 0.5
ACCELERATION = 1.0
DECELERATION = 0.98

FRAME_SIZE = 100
FRAME_DURATION = 0.025
SHEET_WIDTH = 899
SHEET_HEIGHT = 857


def replace_color(pixels, target, replacement):
    """Replace every pixel of exactly ``target`` colour in a surface with ``replacement``."""
    with pygame.PixelArray(pixels) as array:
        array.replace(pygame.Color(target), pygame.Color(replacement))


class Spaceship:
    """A player-controlled ship."""

    def __init__(self, start_pos, color, image=None, explosion_image=None, explode_sound=None):
        self.x, self.y = start_pos
        self.color = pygame.Color(color)
        self.rotation = 0.0

        self.hp_max = HP_MAX
        self.hp = HP_MAX
        self.attack_cooldown = ATTACK_COOLDOWN_MAX

        self.vx = 0.0
        self.vy = 0.0

        self.active = True
        self.destroyed = False
        self.destroying = False
        self.explosion_played = False

        self.frame = pygame.Rect(0, -5, FRAME_SIZE, FRAME_SIZE)
        self._frame_elapsed = 0.0

        self.explosion_image = explosion_image
        self.explode_sound = explode_sound

        if image is None:
            self.image = None
            self.size = DEFAULT_SHIP_SIZE
        else:
            tinted = image.copy()
            replace_color(tinted, SHIP_TARGET_COLOR, self.color)
            width, height = tinted.get_size()
            self.size = (width * SHIP_SCALE, height * SHIP_SCALE)
            scaled = (max(1, round(self.size[0])), max(1, round(self.size[1])))
            self.image = pygame.transform.scale(tinted, scaled)

    @property
    def position(self):
        return (self.x, self.y)

    def bounds(self):
        """Global bounding box of the ship sprite."""
        return Rect.around(self.position, self.size, self.rotation)

    def is_destroyed(self):
        return self.hp <= 0

    def set_position(self, x, y):
        self.x = x
        self.y = y

    def lose_hp(self, value):
        self.hp = max(0, self.hp - value)

    def _move(self, dx, dy):
        self.x += dx
        self.y += dy

    def _rotate(self, angle):
        self.rotation = (self.rotation + angle) % 360.0

    def rotate_clockwise(self):
        if not self.is_destroyed():
            self._rotate(-ROTATE_SPEED)

    def rotate_counter_clockwise(self):
        if not self.is_destroyed():
            self._rotate(ROTATE_SPEED)

    def move_forward(self):
        """Accelerate and thrust along the ship's heading."""
        if self.is_destroyed():
            return
        self.vx += ACCELERATION
        self.vy += ACCELERATION
        if abs(self.vx) > VELOCITY_MAX:
            self.vx = math.copysign(VELOCITY_MAX, self.vx)
        angle = math.radians(self.rotation)
        self._move(self.vx * math.sin(angle), -self.vx * math.cos(angle))

    def move_backward(self):
        if self.is_destroyed():
            return
        angle = math.radians(self.rotation)
        self._move(-BACKWARD_SPEED * math.sin(angle), BACKWARD_SPEED * math.cos(angle))

    def can_attack(self):
        """Return True and restart the cooldown if the ship may fire now."""
        if self.attack_cooldown >= ATTACK_COOLDOWN_MAX and not self.is_destroyed():
            self.attack_cooldown = 0.0
            return True
        return False

    def is_colliding(self, other):
        return self.bounds().intersects(other)

    def destroy(self):
        self.destroyed = True

    def update(self, dt):
        self.update_attack()
        self.update_physics()
        self.update_animation(dt)
        self.update_destruction()

    def update_physics(self):
        """Decay velocity and drift along the heading."""
        self.vx *= DECELERATION
        self.vy *= DECELERATION
        if abs(self.vx) < VELOCITY_MIN:
            self.vx = 0.0
        if abs(self.vy) < VELOCITY_MIN:
            self.vy = 0.0
        angle = math.radians(self.rotation)
        self._move(self.vx * math.sin(angle), -self.vx * math.cos(angle))

    def update_attack(self):
        if self.attack_cooldown < ATTACK_COOLDOWN_MAX:
            self.attack_cooldown += ATTACK_COOLDOWN_STEP

    def update_animation(self, dt):
        """Step through the explosion sprite sheet while the ship is exploding."""
        if not self.destroying:
            return
        self._frame_elapsed += dt
        if self._frame_elapsed < FRAME_DURATION:
            return
        self.frame.left += FRAME_SIZE
        if self.frame.left >= SHEET_WIDTH:
            self.frame.left = 0
            self.frame.top += FRAME_SIZE
            if self.frame.top >= SHEET_HEIGHT:
                self.destroying = False
        self._frame_elapsed = 0.0

    def update_destruction(self):
        """Start the explosion once, the first time the ship is found destroyed."""
        if self.is_destroyed() and not self.explosion_played:
            if self.explode_sound is not None:
                self.explode_sound.play()
            self.destroying = True
            self.explosion_played = True

    def render(self, surface):
        if self.is_destroyed():
            self._render_explosion(surface)
        else:
            self._render_ship(surface)

    def _render_ship(self, surface):
        if self.image is not None:
            rotated = pygame.transform.rotate(self.image, -self.rotation)
            surface.blit(rotated, rotated.get_rect(center=(round(self.x), round(self.y))))
            return
        half_w, half_h = self.size[0] / 2.0, self.size[1] / 2.0
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        outline = ((0.0, -half_h), (half_w, half_h), (-half_w, half_h))
        points = [
            (self.x + px * cos_a - py * sin_a, self.y + px * sin_a + py * cos_a)
            for px, py in outline
        ]
        pygame.draw.polygon(surface, self.color, points)

    def _render_explosion(self, surface):
        origin_x = self.x - FRAME_SIZE / 2.0
        origin_y = self.y - FRAME_SIZE / 2.0
        if self.explosion_image is None:
            if self.destroying:
                pygame.draw.circle(
                    surface, EXPLOSION_COLOR, (round(self.x), round(self.y)), FRAME_SIZE // 4
                )
            return
        visible = self.frame.clip(self.explosion_image.get_rect())
        if visible.width <= 0 or visible.height <= 0:
            return
        dest = (
            round(origin_x + visible.left - self.frame.left),
            round(origin_y + visible.top - self.frame.top),
        )
        surface.blit(self.explosion_image, dest, area=visible)
"""The two-player match: input, bullets, combat, HUD and the main loop."""

from __future__ import annotations

import argparse
import enum
import math
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from spacewar.bullet import Bullet
from spacewar.spaceship import Spaceship

WINDOW_SIZE = (1280, 720)
WINDOW_TITLE = "SpaceWar"
FRAME_RATE = 60

PLAYER_ONE_START = (100.0, 300.0)
PLAYER_TWO_START = (1100.0, 300.0)
PLAYER_ONE_COLOR = (0, 0, 255)
PLAYER_TWO_COLOR = (255, 0, 0)
RESTART_HP = 10

BULLET_SPEED = 10.0
HP_BAR_WIDTH = 300.0
HP_BAR_HEIGHT = 25.0
HP_BAR_POSITIONS = ((20.0, 40.0), (950.0, 40.0))
HP_BAR_COLOR = (255, 0, 0)
HP_BAR_BACK_COLOR = (25, 25, 25, 200)
HP_BAR_OUTLINE = 2

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

FIRE_VOLUME = 0.5
MUSIC_VOLUME = 0.1


class Outcome(enum.Enum):
    """State of the match as seen from the HUD."""

    PLAYING = "playing"
    PLAYER_ONE_WINS = "PLAYER 1 WINS!"
    PLAYER_TWO_WINS = "Player 2 WINS!"
    TIE = "TIE!"


@dataclass(frozen=True)
class Controls:
    """Key bindings for one ship."""

    rotate_clockwise: int
    rotate_counter_clockwise: int
    forward: int
    backward: int
    fire: int

    @classmethod
    def player_one(cls):
        return cls(pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s, pygame.K_SPACE)

    @classmethod
    def player_two(cls):
        return cls(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN, pygame.K_RETURN)

    def keys(self):
        return (
            self.rotate_clockwise,
            self.rotate_counter_clockwise,
            self.forward,
            self.backward,
            self.fire,
        )


class Game:
    """A match between two ships sharing one keyboard."""

    def __init__(
        self,
        *,
        ship_image=None,
        explosion_image=None,
        bullet_image=None,
        background=None,
        fire_sound=None,
        explode_sound=None,
        music=None,
        title_font_path=None,
        message_font_path=None,
    ):
        self.player1 = Spaceship(
            PLAYER_ONE_START, PLAYER_ONE_COLOR, ship_image, explosion_image, explode_sound
        )
        self.player2 = Spaceship(
            PLAYER_TWO_START, PLAYER_TWO_COLOR, ship_image, explosion_image, explode_sound
        )
        self.controls = (Controls.player_one(), Controls.player_two())
        self.bullets: list[Bullet] = []
        self.bullet_image = bullet_image
        self.background = background
        self.fire_sound = fire_sound
        self.music = music
        self.paused = False
        self._font_paths = {"title": title_font_path, "message": message_font_path}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def toggle_pause(self):
        self.paused = not self.paused

    # -- simulation ---------------------------------------------------------

    def update(self, pressed, dt):
        """Advance one frame given the set of pressed key codes and the elapsed seconds."""
        self._update_world()
        self.handle_input(pressed)
        self.update_bullets()
        self.update_combat()
        self.player1.update(dt)
        self.player2.update(dt)
        self.update_player_state(0.0)

    def _update_world(self):
        if self.music is not None and not self.music.is_playing():
            self.music.play()

    def update_bullets(self):
        """Move every bullet and drop those that have left through the top edge."""
        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if b.bounds().bottom() >= 0.0]

    def hp_bar_widths(self):
        """Widths of the two health bars in pixels."""
        return tuple(
            HP_BAR_WIDTH * ship.hp / ship.hp_max for ship in (self.player1, self.player2)
        )

    def update_combat(self):
        """Move bullets again and apply hits on the ship that did not fire them."""
        survivors = []
        for bullet in self.bullets:
            bullet.update()
            box = bullet.bounds()
            if self.player1.is_colliding(box) and bullet.owner != 1:
                self.player1.lose_hp(1)
                continue
            if self.player2.is_colliding(box) and bullet.owner != 2:
                self.player2.lose_hp(1)
                continue
            survivors.append(bullet)
        self.bullets = survivors

    def update_player_state(self, dt):
        self.player1.update(dt)
        self.player2.update(dt)

    def restart(self):
        """Put both ships back at the start with full health and clear the bullets."""
        self.player1.set_position(*PLAYER_ONE_START)
        self.player2.set_position(*PLAYER_TWO_START)
        self.player1.hp = RESTART_HP
        self.player2.hp = RESTART_HP
        self.bullets.clear()
        self._update_world()

    def handle_input(self, pressed):
        """Steer and fire both ships; nothing moves once either ship is destroyed."""
        if self.player1.is_destroyed() or self.player2.is_destroyed():
            return
        for owner, (ship, controls) in enumerate(
            zip((self.player1, self.player2), self.controls), start=1
        ):
            if controls.rotate_clockwise in pressed:
                ship.rotate_clockwise()
            if controls.rotate_counter_clockwise in pressed:
                ship.rotate_counter_clockwise()
            if controls.forward in pressed:
                ship.move_forward()
            if controls.backward in pressed:
                ship.move_backward()
            if controls.fire in pressed and ship.can_attack():
                self.fire(ship, owner)

    def fire(self, ship, owner):
        """Launch a bullet from ``ship`` along its heading and return it."""
        if self.fire_sound is not None:
            self.fire_sound.play()
        angle = math.radians(ship.rotation - 90.0)
        bullet = Bullet(
            ship.x,
            ship.y,
            math.cos(angle),
            math.sin(angle),
            BULLET_SPEED,
            owner,
            image=self.bullet_image,
        )
        self.bullets.append(bullet)
        return bullet

    def outcome(self):
        one_down = self.player1.is_destroyed()
        two_down = self.player2.is_destroyed()
        if one_down and two_down:
            return Outcome.TIE
        if one_down:
            return Outcome.PLAYER_TWO_WINS
        if two_down:
            return Outcome.PLAYER_ONE_WINS
        return Outcome.PLAYING

    # -- drawing ------------------------------------------------------------

    def render(self, surface):
        surface.fill(BLACK)
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for bullet in self.bullets:
            bullet.render(surface)
        self.player1.render(surface)
        self.player2.render(surface)
        self._render_gui(surface)

    def _render_gui(self, surface):
        for (x, y), width in zip(HP_BAR_POSITIONS, self.hp_bar_widths()):
            back = pygame.Surface((int(HP_BAR_WIDTH), int(HP_BAR_HEIGHT)), pygame.SRCALPHA)
            back.fill(HP_BAR_BACK_COLOR)
            surface.blit(back, (int(x), int(y)))
            outline = pygame.Rect(
                int(x) - HP_BAR_OUTLINE,
                int(y) - HP_BAR_OUTLINE,
                int(HP_BAR_WIDTH) + 2 * HP_BAR_OUTLINE,
                int(HP_BAR_HEIGHT) + 2 * HP_BAR_OUTLINE,
            )
            pygame.draw.rect(surface, WHITE, outline, HP_BAR_OUTLINE)
            if width > 0:
                pygame.draw.rect(
                    surface, HP_BAR_COLOR, pygame.Rect(int(x), int(y), round(width), int(HP_BAR_HEIGHT))
                )

        self._draw_text(surface, "Player 1", "title", 60, WHITE, (20, -30))
        self._draw_text(surface, "Player 2", "title", 60, WHITE, (1085, -30))

        result = self.outcome()
        if result is Outcome.PLAYING:
            return
        self._draw_text(surface, "Game over", "title", 200, RED, (325, 165))
        position = (615, 390) if result is Outcome.TIE else (500, 390)
        self._draw_text(surface, result.value, "message", 20, WHITE, position)

    def _font(self, kind, size):
        key = (kind, size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            path = self._font_paths[kind]
            try:
                self._fonts[key] = pygame.font.Font(path, size)
            except (OSError, FileNotFoundError):
                print("Failed to load font!", file=sys.stderr)
                self._fonts[key] = pygame.font.Font(None, size)
        return self._fonts[key]

    def _draw_text(self, surface, text, kind, size, color, position):
        font = self._font(kind, size)
        shadow = font.render(text, True, BLACK)
        x, y = position
        for ox in (-HP_BAR_OUTLINE, HP_BAR_OUTLINE):
            for oy in (-HP_BAR_OUTLINE, HP_BAR_OUTLINE):
                surface.blit(shadow, (x + ox, y + oy))
        surface.blit(font.render(text, True, color), (x, y))


class _MixerMusic:
    """Streams the background track through the mixer's music channel."""

    def __init__(self, path):
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.set_volume(MUSIC_VOLUME)

    def is_playing(self):
        return pygame.mixer.music.get_busy()

    def play(self):
        pygame.mixer.music.play(loops=-1)


def _load_image(path, message, alpha=True):
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError):
        print(message, file=sys.stderr)
        return None
    return image.convert_alpha() if alpha else image.convert()


def _load_sound(path, message, volume=None):
    if not pygame.mixer.get_init():
        return None
    try:
        sound = pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError):
        print(message, file=sys.stderr)
        return None
    if volume is not None:
        sound.set_volume(volume)
    return sound


def _load_music(path):
    if not pygame.mixer.get_init():
        return None
    try:
        return _MixerMusic(path)
    except (pygame.error, FileNotFoundError):
        print("ERROR SOUND Background Music", file=sys.stderr)
        return None


def _existing(path):
    return str(path) if path.is_file() else None


def main(argv=None):
    """Open the window and run the match until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="spacewar", description="Two-player space duel.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the Texture, Sound and Font folders",
    )
    args = parser.parse_args(argv)
    root = args.assets

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)

        game = Game(
            ship_image=_load_image(root / "Texture/Spaceship.png", "ERROR: Spaceship sprite"),
            explosion_image=_load_image(root / "Texture/Explode.png", "ERROR EXPLODE SPRITE"),
            bullet_image=_load_image(root / "Texture/Bullet.png", "Failed to load texture BULLET"),
            background=_load_image(
                root / "Texture/Background2.jpg", "ERROR Background Texture", alpha=False
            ),
            fire_sound=_load_sound(root / "Sound/blaster.mp3", "ERROR SOUND PEW", FIRE_VOLUME),
            explode_sound=_load_sound(root / "Sound/Explode.mp3", "ERROR EXPLODE SOUND"),
            music=_load_music(root / "Sound/BackgroundMusic.mp3"),
            title_font_path=_existing(root / "Font/Pixels.ttf"),
            message_font_path=_existing(root / "Font/dogica.ttf"),
        )
        watched = {key for controls in game.controls for key in controls.keys()}
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            state = pygame.key.get_pressed()
            pressed = {key for key in watched if state[key]}
            dt = clock.tick(FRAME_RATE) / 1000.0
            game.update(pressed, dt)
            game.render(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
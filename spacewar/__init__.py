"""Two-player arcade space duel: ships, bullets, hit points and a pygame main loop."""

__version__ = "0.1.0"
__all__ = ["bullet", "spaceship", "game"]
# spacewar

A two-player, single-keyboard space duel. Each player flies a ship around a
1280×720 arena and tries to shoot the other. A ship has 10 hit points. Every
bullet that strikes the opponent takes one away. When a ship reaches zero it
explodes, and the screen shows "Game over" with the winner, or a tie if both
ships are destroyed.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window, reads the keyboard and plays
sound.

## Playing

```
spacewar
```

| Action             | Player 1 (blue, left) | Player 2 (red, right) |
|--------------------|-----------------------|-----------------------|
| Rotate left        | `A`                   | `←`                   |
| Rotate right       | `D`                   | `→`                   |
| Thrust forward     | `W`                   | `↑`                   |
| Move backward      | `S`                   | `↓`                   |
| Fire               | `Space`               | `Enter`               |

Press `Esc` or close the window to quit.

Forward thrust accelerates the ship up to a top speed, and the ship drifts to
a stop once thrust is released. Each ship has a firing cooldown, so holding
the fire key shoots at a steady rate rather than every frame. The health bars
at the top of the screen show how much each player has left. Once either ship
is destroyed, neither ship can move or fire.

The game loads its artwork, fonts and sounds from the `Texture/`, `Font/` and
`Sound/` folders of the current directory. To use another directory, pass it
with `--assets`:

```
spacewar --assets path/to/assets
```

The game still runs when these files are missing. It prints a message for
each file it could not load, draws simple shapes instead of the images and
uses pygame's default font.

## Using the pieces

The game logic can be driven without a window. This is handy for tests and
for experiments.

```python
from spacewar.game import Game, Outcome

game = Game()
game.update(pressed=set(), dt=1 / 60)
print(game.hp_bar_widths())      # (300.0, 300.0): both bars full
print(game.outcome())            # Outcome.PLAYING while both ships are alive
game.restart()                   # put both ships back and clear all bullets
```

`Game.update` takes the set of pressed pygame key codes and the elapsed
seconds. `Game.fire(ship, owner)` launches a bullet along a ship's heading,
and `Game.render(surface)` draws the whole frame onto any pygame surface.

`spacewar.spaceship.Spaceship` holds the movement, cooldown, health and
explosion rules. `spacewar.bullet.Bullet` moves a projectile in a straight
line. `spacewar.bullet.Rect` is the axis-aligned box that both use to detect
hits.

## What it does not do

There is no menu, pause screen or restart key in the running game. After a
match ends, close the window and start `spacewar` again. The `Game.restart`
method is available only to code that drives a `Game` itself.

## Running the tests

```
pip install ".[test]"
pytest
```
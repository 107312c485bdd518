# kataster

A small asteroids-style arcade shooter built on pygame. Fly a ship around a
wrap-around arena, shoot the asteroids that drift in from the edges and
survive as long as you can. Big asteroids split into four medium ones,
medium ones into four small ones; each destroyed asteroid adds to your score.

## Installing

```
pip install .
```

## Playing

```
kataster
```

Options:

| Option            | Meaning                                                   |
|-------------------|-----------------------------------------------------------|
| `--assets DIR`    | directory holding images, sounds and fonts (default `assets`) |
| `--seed N`        | random seed, for a repeatable game                        |
| `--frames N`      | stop after this many frames                               |

Controls:

| Action            | Keys                 |
|-------------------|----------------------|
| Thrust            | `W` or `Up`          |
| Rotate left       | `A` or `Left`        |
| Rotate right      | `D` or `Right`       |
| Fire              | `Space`              |
| Pause / resume    | `Escape`             |
| Menu up / down    | `W`/`Up`, `S`/`Down` |
| Select menu entry | `Enter`              |

You start with three lives. After a hit the ship flashes and is invincible
for two seconds; further hits while flashing restart that window, until five
seconds of invincibility have been spent in a row. The first asteroid comes
after five seconds, and each new one arrives sooner than the last (never
more than 20 on screen).

Scoring:

- big asteroid: 40
- medium asteroid: 20
- small asteroid: 10

## Asset files

The game looks in the `--assets` directory for these files:

- images: `laserRed07.png`, `meteorBrown_big1.png`, `meteorBrown_med1.png`,
  `meteorBrown_small1.png`, `playerShip2_red.png`, `explosion01.png`,
  `flash00.png`, `playerLife1_red.png`
- sounds: `sfx_laser1.ogg`, `Explosion_ship.ogg`, `Explosion.ogg`
- fonts: `kenvector_future.ttf`, `FiraSans-Bold.ttf`

None of them ship with the package. A missing image is drawn as a plain
coloured shape, a missing sound is silent and a missing font falls back to
pygame's default font.

## Using the pieces

The game logic runs without a window. `kataster.game.Game` is stepped with
`Game.update(delta, actions)`, where `actions` are `PlayerAction` values from
`kataster.player_ship`, and driven through the menus with
`Game.handle_menu_action(action)` using `MenuAction` from `kataster.menu`.
Smaller parts can be used on their own:

- `kataster.arena`: `Timer`, `Body`, `Arena`, `new_arena()` and
  `wrap_position(body)` for the wrap-around edges
- `kataster.state`: `AppState`, `GameState` and the queued `StateMachine`
- `kataster.asteroid`: `AsteroidSize` (score, split, radius),
  `tick_spawner(...)` and `damage_asteroid(...)`
- `kataster.player_ship`: `Ship` with `apply_input`, `dampen`,
  `tick_timers`, `damage` (returning a `DamageOutcome`) and `color`
- `kataster.laser`, `kataster.explosion`, `kataster.hud`,
  `kataster.particle_effects`, `kataster.background` and `kataster.menu`
  for shots, explosions, HUD contents, exhaust particles, the star field and
  menu logic

## What it does not do

- The credits screen shows only its "Menu" and "Exit" buttons; no credit
  lines are drawn.
- Asteroids do not bounce off each other; they pass through one another.
- The background is a simple drifting star field.

## Running the tests

```
pip install .[test]
pytest
```
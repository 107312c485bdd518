"""The game loop: ties states, menus and gameplay together and draws them."""

from __future__ import annotations

import argparse
import math
import random
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

import pygame

from kataster.arena import ARENA_HEIGHT, ARENA_WIDTH, Arena, Body, new_arena, wrap_position
from kataster.assets import AudioAssets, SpriteAssets, UiAssets, load_assets
from kataster.asteroid import (
    Asteroid,
    AsteroidSize,
    asteroid_from_spawn,
    damage_asteroid,
    tick_spawner,
)
from kataster.background import Starfield
from kataster.explosion import Explosion, ExplosionKind, spawn_explosion
from kataster.hud import HUD_MARGIN, SCORE_COLOR, SCORE_FONT_SIZE, life_icons, score_text
from kataster.laser import LASER_SIZE, Laser, laser_hits
from kataster.menu import (
    BUTTON_BORDER,
    BUTTON_MARGIN,
    BUTTON_RADIUS,
    BUTTON_SIZE,
    ENTRY_FONT_SIZE,
    MENU_KEY_BINDINGS,
    SELECTED_BG,
    SELECTED_BORDER,
    TITLE_FONT_SIZE,
    UNSELECTED_BG,
    UNSELECTED_BORDER,
    DrawBlink,
    MenuAction,
    MenuHandler,
    MenuOutcome,
    credits_menu,
    game_menu_accept,
    gameover_menu,
    main_menu,
    main_menu_accept,
    pause_menu,
    toggle_pause,
)
from kataster.particle_effects import ExhaustEmitter
from kataster.player_ship import (
    KEY_BINDINGS,
    SHIP_RADIUS,
    SHIP_SIZE,
    DamageOutcome,
    PlayerAction,
    Ship,
    new_ship,
)
from kataster.state import AppState, GameState, StateMachine

WINDOW_TITLE = "Kataster"
FRAME_RATE = 60
_SHIP_MASS = math.pi * SHIP_RADIUS * SHIP_RADIUS


class Game:
    """The whole game world, advanced one frame at a time."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self.states = StateMachine()
        self.menu: Optional[MenuHandler] = None
        self.blink: Optional[DrawBlink] = None
        self.title_visible = True
        self.arena: Optional[Arena] = None
        self.ship: Optional[Ship] = None
        self.asteroids: list[Asteroid] = []
        self.lasers: list[Laser] = []
        self.explosions: list[Explosion] = []
        self.exhaust = ExhaustEmitter()
        self.starfield = Starfield(seed=0 if seed is None else seed)
        self.exit_requested = False
        # Names of AudioAssets attributes to play, filled during update.
        self.sounds: list[str] = []

    @property
    def score(self) -> int:
        return self.arena.score if self.arena is not None else 0

    def update(self, delta: float, actions: Iterable[PlayerAction] = ()) -> None:
        """Advance one frame of ``delta`` seconds with the player actions held."""
        if delta < 0:
            raise ValueError(f"cannot move time backwards: {delta}")
        for state in self.states.apply():
            self._enter(state)
        self.states.auto_advance()
        self.starfield.update(delta, self.states.game is GameState.PAUSED)
        if self.states.game is GameState.RUNNING:
            self._play(delta, frozenset(actions))
        if self.blink is not None:
            self.title_visible = self.blink.tick(delta, self.title_visible)

    def handle_menu_action(self, action: MenuAction) -> None:
        """React to a freshly pressed menu key."""
        app_state = self.states.app
        game_state = self.states.game
        if action is MenuAction.MENU_UP:
            if self.menu is not None:
                self.menu.move_up()
        elif action is MenuAction.MENU_DOWN:
            if self.menu is not None:
                self.menu.move_down()
        elif action is MenuAction.ACCEPT:
            if self.menu is None:
                return
            selected = self.menu.selected_id
            outcome = main_menu_accept(app_state, selected)
            if outcome is None and app_state is AppState.GAME and game_state is not None:
                outcome = game_menu_accept(game_state, selected)
            if outcome is not None:
                self._apply_outcome(outcome)
        elif action is MenuAction.PAUSE_UNPAUSE:
            if app_state is AppState.GAME and game_state is not None:
                target = toggle_pause(game_state)
                if target is not None:
                    self.states.set_game(target)

    def _apply_outcome(self, outcome: MenuOutcome) -> None:
        if outcome.app is not None:
            self.states.set_app(outcome.app)
        if outcome.game is not None:
            self.states.set_game(outcome.game)
        if outcome.exit_app:
            self.exit_requested = True

    def _show_menu(self, menu: Optional[MenuHandler]) -> None:
        self.menu = menu
        self.blink = DrawBlink(enabled=menu.main_text_blink) if menu is not None else None
        self.title_visible = True

    def _enter(self, state: Union[AppState, GameState]) -> None:
        if state is AppState.MENU:
            self._clear_game()
            self._show_menu(main_menu())
        elif state is AppState.CREDITS:
            self._clear_game()
            self._show_menu(credits_menu())
        elif state is AppState.GAME:
            self._show_menu(None)
        elif state is GameState.SETUP:
            self._start_game()
        elif state is GameState.RUNNING:
            self._show_menu(None)
        elif state is GameState.PAUSED:
            self._show_menu(pause_menu())
        elif state is GameState.OVER:
            self._show_menu(gameover_menu())

    def _start_game(self) -> None:
        self._clear_game()
        self.arena = new_arena()
        self.ship = new_ship()

    def _clear_game(self) -> None:
        self.arena = None
        self.ship = None
        self.asteroids = []
        self.lasers = []
        self.explosions = []
        self.exhaust = ExhaustEmitter()

    def _explode(self, kind: ExplosionKind, x: float, y: float) -> None:
        explosion = spawn_explosion(kind, x, y)
        self.explosions.append(explosion)
        self.sounds.append(explosion.sound)

    def _play(self, delta: float, actions: frozenset) -> None:
        spawn = tick_spawner(self.arena, delta, len(self.asteroids), self.rng)
        if spawn is not None:
            self.asteroids.append(asteroid_from_spawn(spawn))

        ship = self.ship
        if ship is not None:
            laser = ship.apply_input(actions)
            if laser is not None:
                self.lasers.append(laser)
                self.sounds.append("laser_trigger")
            if PlayerAction.FORWARD in actions:
                self.exhaust.burst(ship.body.x, ship.body.y, ship.body.angle, self.rng)
            ship.dampen(delta)
            ship.tick_timers(delta)
            fx, fy = ship.force
            ship.body.vx += fx / _SHIP_MASS * delta
            ship.body.vy += fy / _SHIP_MASS * delta

        for body in self._bodies():
            body.x += body.vx * delta
            body.y += body.vy * delta
            body.angle += body.angvel * delta
            wrap_position(body)

        self._laser_collisions()
        self._ship_collisions()
        self.lasers = [laser for laser in self.lasers if not laser.tick(delta)]
        self.explosions = [e for e in self.explosions if e.tick(delta)]
        self.exhaust.update(delta)

    def _bodies(self) -> list[Body]:
        bodies = [asteroid.body for asteroid in self.asteroids]
        bodies.extend(laser.body for laser in self.lasers)
        if self.ship is not None:
            bodies.append(self.ship.body)
        return bodies

    def _laser_collisions(self) -> None:
        spent: set[int] = set()
        destroyed: set[int] = set()
        fragments = []
        for laser, asteroid in laser_hits(self.lasers, self.asteroids):
            if id(laser) in spent or id(asteroid) in destroyed:
                continue
            spent.add(id(laser))
            destroyed.add(id(asteroid))
            fragments.extend(damage_asteroid(asteroid, self.arena, self.rng))
            self._explode(ExplosionKind.LASER_ON_ASTEROID, laser.body.x, laser.body.y)
        if not spent:
            return
        self.lasers = [laser for laser in self.lasers if id(laser) not in spent]
        self.asteroids = [a for a in self.asteroids if id(a) not in destroyed]
        self.asteroids.extend(asteroid_from_spawn(fragment) for fragment in fragments)

    def _ship_collisions(self) -> None:
        ship = self.ship
        if ship is None:
            return
        for asteroid in self.asteroids:
            if not ship.body.collides_with(asteroid.body):
                continue
            outcome = ship.damage()
            if outcome is DamageOutcome.DESTROYED:
                self._explode(ExplosionKind.SHIP_DEAD, ship.body.x, ship.body.y)
                self.ship = None
                self.states.set_game(GameState.OVER)
                return
            if outcome is DamageOutcome.HIT:
                self._explode(ExplosionKind.SHIP_CONTACT, ship.body.x, ship.body.y)


def _rgb(color: Iterable[float]) -> tuple[int, ...]:
    return tuple(max(0, min(255, round(c * 255))) for c in color)


def _to_screen(x: float, y: float) -> tuple[float, float]:
    return x + ARENA_WIDTH / 2.0, ARENA_HEIGHT / 2.0 - y


def _asset_loader(directory: Path) -> Callable[[str], Any]:
    def load(name: str) -> Any:
        path = directory / name
        if not path.is_file():
            return None
        suffix = path.suffix.lower()
        try:
            if suffix == ".png":
                return pygame.image.load(str(path)).convert_alpha()
            if suffix == ".ogg":
                return pygame.mixer.Sound(str(path)) if pygame.mixer.get_init() else None
        except pygame.error:
            return None
        if suffix == ".ttf":
            return str(path)
        return None

    return load


class _Renderer:
    def __init__(self, screen: Any, sprites: SpriteAssets, ui: UiAssets) -> None:
        self.screen = screen
        self.sprites = sprites
        self.ui = ui
        self._fonts: dict[tuple[Optional[str], int], Any] = {}

    def _font(self, path: Optional[str], size: float) -> Any:
        key = (path, int(size))
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(path, int(size))
        return self._fonts[key]

    def draw(self, game: Game) -> None:
        self.screen.fill((0, 0, 0))
        for star in game.starfield.stars():
            shade = int(255 * star.brightness)
            pygame.draw.circle(self.screen, (shade, shade, shade), _to_screen(star.x, star.y), 1)
        if game.states.app is AppState.GAME:
            self._draw_world(game)
            self._draw_hud(game)
        if game.menu is not None:
            self._draw_menu(game)

    def _draw_sprite(
        self,
        image: Any,
        body_x: float,
        body_y: float,
        angle: float,
        size: Optional[tuple[float, float]],
        fallback: tuple[int, int, int],
        radius: float,
        tint: Optional[tuple[float, float, float, float]] = None,
    ) -> None:
        center = _to_screen(body_x, body_y)
        if image is None:
            pygame.draw.circle(self.screen, fallback, center, max(int(radius), 1))
            return
        if size is not None:
            image = pygame.transform.smoothscale(image, (max(int(size[0]), 1), max(int(size[1]), 1)))
        image = pygame.transform.rotate(image, math.degrees(angle))
        if tint is not None and tint != (1.0, 1.0, 1.0, 1.0):
            image = image.copy()
            image.fill(_rgb(tint), special_flags=pygame.BLEND_RGBA_MULT)
        self.screen.blit(image, image.get_rect(center=center))

    def _draw_world(self, game: Game) -> None:
        meteors = {
            AsteroidSize.BIG: self.sprites.meteor_big,
            AsteroidSize.MEDIUM: self.sprites.meteor_med,
            AsteroidSize.SMALL: self.sprites.meteor_small,
        }
        for asteroid in game.asteroids:
            body = asteroid.body
            self._draw_sprite(
                meteors[asteroid.size], body.x, body.y, body.angle, None,
                (140, 100, 60), body.radius,
            )
        for particle in game.exhaust.particles:
            r, g, b, a = game.exhaust.color(particle)
            pygame.draw.circle(
                self.screen, _rgb((r * a, g * a, b * a)),
                _to_screen(particle.x, particle.y), max(int(game.exhaust.size / 2), 1),
            )
        for laser in game.lasers:
            body = laser.body
            self._draw_sprite(
                self.sprites.laser, body.x, body.y, body.angle, LASER_SIZE,
                (255, 40, 40), body.radius,
            )
        if game.ship is not None:
            body = game.ship.body
            self._draw_sprite(
                self.sprites.player_ship, body.x, body.y, body.angle, SHIP_SIZE,
                (220, 60, 60), body.radius, game.ship.color(),
            )
        for explosion in game.explosions:
            scale = explosion.scale()
            width, height = explosion.size
            self._draw_sprite(
                getattr(self.sprites, explosion.texture), explosion.x, explosion.y, 0.0,
                (width * scale, height * scale), (255, 200, 80), width * scale / 2.0,
            )

    def _draw_hud(self, game: Game) -> None:
        font = self._font(self.ui.font, SCORE_FONT_SIZE)
        text = font.render(score_text(game.score), True, SCORE_COLOR)
        self.screen.blit(text, text.get_rect(topright=(ARENA_WIDTH - HUD_MARGIN, HUD_MARGIN)))
        life = game.ship.life if game.ship is not None else 0
        x = HUD_MARGIN
        for visible in life_icons(life):
            icon = self.ui.ship_life
            width = icon.get_width() if icon is not None else 30
            if visible:
                if icon is not None:
                    self.screen.blit(icon, (x, HUD_MARGIN))
                else:
                    pygame.draw.rect(self.screen, (220, 60, 60), (x, HUD_MARGIN, width, 20))
            x += width + 2 * HUD_MARGIN

    def _draw_menu(self, game: Game) -> None:
        menu = game.menu
        color = _rgb(menu.main_text_color)
        if menu.main_text and game.title_visible:
            title = self._font(self.ui.font, TITLE_FONT_SIZE).render(menu.main_text, True, color)
            self.screen.blit(title, title.get_rect(center=(ARENA_WIDTH / 2.0, ARENA_HEIGHT / 4.0)))
        width, height = BUTTON_SIZE
        step = height + 2 * BUTTON_MARGIN
        top = ARENA_HEIGHT * 0.75 - step * len(menu.entries) / 2.0
        entry_font = self._font(self.ui.font, ENTRY_FONT_SIZE)
        for index, entry in enumerate(menu.entries):
            selected = index == menu.selected_id
            rect = pygame.Rect(0, 0, int(width), int(height))
            rect.center = (int(ARENA_WIDTH / 2.0), int(top + index * step + step / 2.0))
            background = SELECTED_BG if selected else UNSELECTED_BG
            border = SELECTED_BORDER if selected else UNSELECTED_BORDER
            pygame.draw.rect(self.screen, _rgb(background), rect, border_radius=int(BUTTON_RADIUS))
            pygame.draw.rect(
                self.screen, _rgb(border), rect,
                width=int(BUTTON_BORDER), border_radius=int(BUTTON_RADIUS),
            )
            label = entry_font.render(entry, True, color)
            self.screen.blit(label, label.get_rect(center=rect.center))


def _play_sounds(game: Game, audio: AudioAssets) -> None:
    for name in game.sounds:
        sound = getattr(audio, name, None)
        if sound is not None:
            sound.play()
    game.sounds.clear()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="kataster", description="Shoot the asteroids.")
    parser.add_argument("--assets", type=Path, default=Path("assets"),
                        help="directory holding images, sounds and fonts")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            pygame.mixer.init()
        except pygame.error:
            pass
        screen = pygame.display.set_mode((int(ARENA_WIDTH), int(ARENA_HEIGHT)))
        pygame.display.set_caption(WINDOW_TITLE)
        sprites, audio, ui = load_assets(_asset_loader(args.assets))
        renderer = _Renderer(screen, sprites, ui)
        player_keys = [(action, pygame.key.key_code(name)) for action, name in KEY_BINDINGS]
        menu_keys = {pygame.key.key_code(name): action for action, name in MENU_KEY_BINDINGS}
        game = Game(seed=args.seed)
        clock = pygame.time.Clock()
        frame = 0
        while not game.exit_requested and (args.frames is None or frame < args.frames):
            delta = clock.tick(FRAME_RATE) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.exit_requested = True
                elif event.type == pygame.KEYDOWN and event.key in menu_keys:
                    game.handle_menu_action(menu_keys[event.key])
            pressed = pygame.key.get_pressed()
            actions = {action for action, key in player_keys if pressed[key]}
            game.update(delta, actions)
            _play_sounds(game, audio)
            renderer.draw(game)
            pygame.display.flip()
            frame += 1
    finally:
        pygame.quit()
    return 0
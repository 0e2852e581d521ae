"""
Arcade shooter simulation: ship, projectiles, falling obstacles.
NO UI DEPENDENCIES.

The engine has no timer of its own. Whoever owns it calls tick() at a
fixed rate (~20 Hz) and spawn_obstacle() at a slower one (~1 Hz); see
scheduler.FixedStepScheduler.

Coordinate system:
- x is centred on 0, increasing to the right
- y increases downward; obstacles fall toward +y, projectiles rise toward -y
"""
import logging
import math
import random
import time
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Set, Tuple

from .constants import (
    STARTING_LIVES, POINTS_PER_HIT, WIN_SCORE, FIRE_COOLDOWN,
    DEFAULT_FIELD_WIDTH, FIELD_EDGE_MARGIN, SPAWN_Y, TOP_BOUNDARY,
    BOTTOM_BOUNDARY, MUZZLE_Y, PROJECTILE_VELOCITY,
    OBSTACLE_MIN_SIZE, OBSTACLE_MAX_SIZE,
    OBSTACLE_MIN_FALL_SPEED, OBSTACLE_MAX_FALL_SPEED, OBSTACLE_SPIN_PER_TICK,
)
from .events import (
    GameEvent, StatePublisher, ObstacleDestroyedEvent, LifeLostEvent, MatchEndedEvent
)

logger = logging.getLogger(__name__)

LOSS_REASON = "Hit by Space Rock"
WIN_REASON = "Target Score Reached!"


@dataclass
class Projectile:
    """A shot travelling up the field."""
    id: int
    x: float
    y: float
    velocity: float = PROJECTILE_VELOCITY

    def advance(self) -> None:
        self.y -= self.velocity

    def is_out_of_bounds(self) -> bool:
        return self.y < TOP_BOUNDARY


@dataclass
class Obstacle:
    """A falling rock."""
    id: int
    x: float
    y: float
    fall_speed: float
    size: float
    rotation: float = 0.0
    alive: bool = True

    def advance(self) -> None:
        self.y += self.fall_speed
        self.rotation = (self.rotation + OBSTACLE_SPIN_PER_TICK) % 360.0

    def has_landed(self) -> bool:
        return self.y > BOTTOM_BOUNDARY

    def collides_with(self, projectile: Projectile) -> bool:
        """Axis-aligned proximity test scaled by the rock's size."""
        return (
            abs(projectile.x - self.x) < self.size
            and abs(projectile.y - self.y) < self.size
        )


@dataclass(frozen=True)
class ShooterSnapshot:
    """Read-only view handed to the renderer."""
    player_x: float
    score: int
    lives: int
    is_over: bool
    has_won: bool
    end_reason: Optional[str]
    field_width: float
    projectiles: Tuple[Projectile, ...]
    obstacles: Tuple[Obstacle, ...]


class ArcadeShooterEngine(StatePublisher):
    """
    Tick-driven shooter match.

    Once the match ends (out of lives or target score reached) tick(),
    fire(), spawn_obstacle() and set_player_position() are ignored until
    reset().

    Usage:
        engine = ArcadeShooterEngine(field_width=400)
        engine.fire()
        events = engine.tick()
    """

    def __init__(
        self,
        field_width: float = DEFAULT_FIELD_WIDTH,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        super().__init__()
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._next_id = 0

        # Populated by reset()
        self.field_width = field_width
        self.player_x = 0.0
        self.score = 0
        self.lives = STARTING_LIVES
        self.is_over = False
        self.has_won = False
        self.projectiles: List[Projectile] = []
        self.obstacles: List[Obstacle] = []
        self._last_fire_time: Optional[float] = None

        self.reset(field_width)

    # =========================================================================
    # MATCH FLOW
    # =========================================================================

    def reset(self, field_width: Optional[float] = None) -> None:
        """Start a fresh match, optionally on a field of a new width."""
        before = self.snapshot()
        if field_width is not None:
            self.field_width = float(field_width)

        self.player_x = 0.0
        self.score = 0
        self.lives = STARTING_LIVES
        self.is_over = False
        self.has_won = False
        self.projectiles = []
        self.obstacles = []
        self._last_fire_time = None

        logger.info(f"Shooter match reset (field width {self.field_width})")
        if self.snapshot() != before:
            self._publish()

    @property
    def is_finished(self) -> bool:
        """True once the match is won or lost."""
        return self.is_over or self.has_won

    @property
    def end_reason(self) -> Optional[str]:
        if self.is_over:
            return LOSS_REASON
        if self.has_won:
            return WIN_REASON
        return None

    @property
    def max_x(self) -> float:
        """Largest horizontal position reachable by the ship or a spawn."""
        return max(0.0, self.field_width / 2 - FIELD_EDGE_MARGIN)

    # =========================================================================
    # INPUT
    # =========================================================================

    def set_player_position(self, x: float) -> None:
        """Move the ship, clamped to the field. Non-finite x is ignored."""
        if self.is_finished or not math.isfinite(x):
            return

        clamped = min(max(x, -self.max_x), self.max_x)
        if clamped == self.player_x:
            return
        self.player_x = clamped
        self._publish()

    def fire(self) -> None:
        """Launch a projectile from the ship unless still cooling down."""
        if self.is_finished:
            return

        now = self._clock()
        if self._last_fire_time is not None and now - self._last_fire_time <= FIRE_COOLDOWN:
            return
        self._last_fire_time = now

        projectile = Projectile(id=self._allocate_id(), x=self.player_x, y=MUZZLE_Y)
        self.projectiles.append(projectile)
        logger.debug(f"Fired projectile {projectile.id} at x={projectile.x:.1f}")
        self._publish()

    # =========================================================================
    # SIMULATION
    # =========================================================================

    def spawn_obstacle(self) -> Optional[Obstacle]:
        """
        Drop one rock in from above the field.
        Returns the new obstacle, or None if the match is over.
        """
        if self.is_finished:
            return None

        obstacle = Obstacle(
            id=self._allocate_id(),
            x=self._rng.uniform(-self.max_x, self.max_x),
            y=SPAWN_Y,
            fall_speed=self._rng.uniform(OBSTACLE_MIN_FALL_SPEED, OBSTACLE_MAX_FALL_SPEED),
            size=self._rng.uniform(OBSTACLE_MIN_SIZE, OBSTACLE_MAX_SIZE),
            rotation=self._rng.uniform(0.0, 360.0),
        )
        self.obstacles.append(obstacle)
        logger.debug(
            f"Spawned obstacle {obstacle.id} at x={obstacle.x:.1f} "
            f"size={obstacle.size:.1f} speed={obstacle.fall_speed:.1f}"
        )
        self._publish()
        return obstacle

    def tick(self) -> List[GameEvent]:
        """
        Advance the simulation by one step.
        Returns list of events that occurred.
        """
        if self.is_finished:
            return []

        events: List[GameEvent] = []

        for projectile in self.projectiles:
            projectile.advance()
        for obstacle in self.obstacles:
            obstacle.advance()

        self.projectiles = [p for p in self.projectiles if not p.is_out_of_bounds()]

        events.extend(self._resolve_collisions())
        events.extend(self._remove_landed_obstacles())
        events.extend(self._check_match_end())

        self._publish()
        return events

    def _resolve_collisions(self) -> List[GameEvent]:
        """
        Score every overlapping (projectile, obstacle) pair, then remove
        everything that was hit.
        """
        events: List[GameEvent] = []
        hit_projectiles: Set[int] = set()
        hit_obstacles: Set[int] = set()

        for projectile in self.projectiles:
            for obstacle in self.obstacles:
                if not obstacle.collides_with(projectile):
                    continue
                obstacle.alive = False
                hit_projectiles.add(projectile.id)
                hit_obstacles.add(obstacle.id)
                self.score += POINTS_PER_HIT
                events.append(ObstacleDestroyedEvent(obstacle.id, projectile.id, POINTS_PER_HIT))
                logger.debug(f"Projectile {projectile.id} destroyed obstacle {obstacle.id}")

        if events:
            self.projectiles = [p for p in self.projectiles if p.id not in hit_projectiles]
            self.obstacles = [o for o in self.obstacles if o.id not in hit_obstacles]
        return events

    def _remove_landed_obstacles(self) -> List[GameEvent]:
        events: List[GameEvent] = []
        remaining: List[Obstacle] = []

        for obstacle in self.obstacles:
            if obstacle.has_landed():
                self.lives = max(0, self.lives - 1)
                events.append(LifeLostEvent(obstacle.id, self.lives))
                logger.debug(f"Obstacle {obstacle.id} got through, {self.lives} lives left")
            else:
                remaining.append(obstacle)

        self.obstacles = remaining
        return events

    def _check_match_end(self) -> List[GameEvent]:
        if self.lives <= 0:
            self.is_over = True
        elif self.score >= WIN_SCORE:
            self.has_won = True
        else:
            return []

        logger.info(f"Shooter match over: {self.end_reason} (score {self.score})")
        return [MatchEndedEvent(won=self.has_won, reason=self.end_reason, final_score=self.score)]

    # =========================================================================
    # STATE QUERIES
    # =========================================================================

    def snapshot(self) -> ShooterSnapshot:
        return ShooterSnapshot(
            player_x=self.player_x,
            score=self.score,
            lives=self.lives,
            is_over=self.is_over,
            has_won=self.has_won,
            end_reason=self.end_reason,
            field_width=self.field_width,
            projectiles=tuple(replace(p) for p in self.projectiles),
            obstacles=tuple(replace(o) for o in self.obstacles),
        )

    def _allocate_id(self) -> int:
        self._next_id += 1
        return self._next_id

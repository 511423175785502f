"""Collision detection between rectangular colliders."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, Protocol

from brickengine.components import (
    PhysicsComponent,
    Position,
    RectangleColliderComponent,
    Scale,
)
from brickengine.enums import Axis, Direction

# Tolerance used when deciding whether a remaining distance counts as zero.
_ZERO_TOLERANCE = 1e-9


class EntityManagerLike(Protocol):
    """What the detector needs from an entity manager."""

    def get_component(self, entity_id: int, component_type: type) -> Any: ...

    def get_absolute_transform(self, entity_id: int) -> tuple[Position, Scale]: ...

    def get_parent(self, entity_id: int) -> int | None: ...

    def get_children(self, entity_id: int) -> Iterable[int]: ...

    def get_entities_by_component(self, component_type: type) -> Mapping[int, Any]: ...

    def get_tags(self, entity_id: int) -> Iterable[str]: ...


@dataclass
class Collision:
    """A collision with another entity."""

    opposite_id: int
    is_trigger: bool


@dataclass
class DiscreteCollision:
    """An overlap found by discrete detection."""

    opposite_id: int
    is_trigger: bool
    # Point of contact between the two objects
    position: Position
    # Vector that, added to the entity's position, resolves the overlap
    delta: Position
    # Surface normal at the point of contact
    normal: Position


@dataclass
class ContinuousCollision:
    """Nearest obstacle along an axis and the distance left to it."""

    opposite_id: int | None
    space_left: float


@dataclass
class CollisionDetectorInfo:
    """Counters of how many pairs were examined."""

    discrete_calculated_counter: int = 0
    continuous_calculations_counter: int = 0


def _is_zero(value: float) -> bool:
    return math.isclose(value, 0.0, abs_tol=_ZERO_TOLERANCE)


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


class CollisionDetector:
    """Finds collisions of an entity against all entities with a rectangle collider.

    ``trigger_tag_exceptions`` maps a tag to the tags it still collides with
    even when one of the two colliders is a trigger.
    """

    def __init__(
        self,
        trigger_tag_exceptions: Mapping[str, Iterable[str]],
        entity_manager: EntityManagerLike,
    ) -> None:
        self._exceptions = {tag: set(others) for tag, others in trigger_tag_exceptions.items()}
        self._em = entity_manager
        self._info = CollisionDetectorInfo()

    def detect_collision(self, entity_id: int) -> list[Collision]:
        """Collect collisions using the strategies set on the entity's physics component."""
        physics = self._em.get_component(entity_id, PhysicsComponent)
        collisions: list[Collision] = []
        detection = physics.collision_detection
        if detection.is_discrete():
            collisions.extend(
                Collision(dc.opposite_id, dc.is_trigger)
                for dc in self.detect_discrete_collision(entity_id)
            )
        if detection.is_continuous():
            for axis in (Axis.X, Axis.Y):
                for direction in (Direction.NEGATIVE, Direction.POSITIVE):
                    found = self.detect_continuous_collision(entity_id, axis, direction)
                    if found.opposite_id is None:
                        continue
                    if direction == Direction.NEGATIVE:
                        touching = found.space_left > 0 or _is_zero(found.space_left)
                    else:
                        touching = found.space_left < 0 or _is_zero(found.space_left)
                    if touching:
                        collisions.append(Collision(found.opposite_id, False))
        return collisions

    def has_trigger_exception(self, tags_1: Iterable[str], tags_2: Iterable[str]) -> bool:
        """True if any tag on either side lists a tag of the other side."""
        tags_1 = set(tags_1)
        tags_2 = set(tags_2)
        for own, other in ((tags_1, tags_2), (tags_2, tags_1)):
            for tag in own:
                if tag in self._exceptions and self._exceptions[tag] & other:
                    return True
        return False

    def get_info(self) -> CollisionDetectorInfo:
        """Return a copy of the counters."""
        return replace(self._info)

    def invalidate_info(self) -> None:
        self._info = CollisionDetectorInfo()

    def _family(self, entity_id: int) -> tuple[int | None, set[int]]:
        return self._em.get_parent(entity_id), set(self._em.get_children(entity_id))

    def detect_discrete_collision(self, entity_id: int) -> list[DiscreteCollision]:
        """Return every collider that currently overlaps the entity."""
        entity_collider = self._em.get_component(entity_id, RectangleColliderComponent)
        entity_position, entity_scale = self._em.get_absolute_transform(entity_id)
        parent, children = self._family(entity_id)

        collisions: list[DiscreteCollision] = []
        for opposite_id, opposite_collider in self._em.get_entities_by_component(
            RectangleColliderComponent
        ).items():
            if opposite_id == entity_id:
                continue
            opposite_position, opposite_scale = self._em.get_absolute_transform(opposite_id)
            if parent is not None and parent == opposite_id:
                continue
            if opposite_id in children:
                continue

            is_trigger = False
            if entity_collider.is_trigger or opposite_collider.is_trigger:
                # Triggers pass through everything except the listed exceptions.
                if not self.has_trigger_exception(
                    self._em.get_tags(entity_id), self._em.get_tags(opposite_id)
                ):
                    is_trigger = True

            self._info.discrete_calculated_counter += 1

            entity_half_x = (entity_scale.x * entity_collider.x_scale) / 2
            entity_half_y = (entity_scale.y * entity_collider.y_scale) / 2
            opposite_half_x = (opposite_scale.x * opposite_collider.x_scale) / 2
            opposite_half_y = (opposite_scale.y * opposite_collider.y_scale) / 2

            delta_x = entity_position.x - opposite_position.x
            pos_x = (entity_half_x + opposite_half_x) - abs(delta_x)
            if pos_x <= 0:
                continue

            delta_y = entity_position.y - opposite_position.y
            pos_y = (entity_half_y + opposite_half_y) - abs(delta_y)
            if pos_y <= 0:
                continue

            if pos_x < pos_y:
                sign_x = _sign(delta_x)
                collisions.append(
                    DiscreteCollision(
                        opposite_id,
                        is_trigger,
                        Position(opposite_position.x + opposite_half_x * sign_x, entity_position.y),
                        Position(pos_x * sign_x, 0),
                        Position(sign_x, 0),
                    )
                )
            else:
                sign_y = _sign(delta_y)
                collisions.append(
                    DiscreteCollision(
                        opposite_id,
                        is_trigger,
                        Position(entity_position.x, opposite_position.y + opposite_half_y * sign_y),
                        Position(0, pos_y * sign_y),
                        Position(0, sign_y),
                    )
                )
        return collisions

    def detect_continuous_collision(
        self, entity_id: int, axis: Axis, direction: Direction
    ) -> ContinuousCollision:
        """Find the nearest collider along ``axis`` in ``direction``."""
        entity_collider = self._em.get_component(entity_id, RectangleColliderComponent)
        entity_position, entity_scale = self._em.get_absolute_transform(entity_id)
        parent, children = self._family(entity_id)

        if direction == Direction.NEGATIVE:
            start = -sys.float_info.max
        else:
            start = math.inf
        collision = ContinuousCollision(None, start)

        def extents(position: Position, scale: Scale, collider: Any) -> tuple[float, float, float, float]:
            half_x = (scale.x * collider.x_scale) / 2
            half_y = (scale.y * collider.y_scale) / 2
            if axis == Axis.X:
                return position.x, half_x, position.y, half_y
            return position.y, half_y, position.x, half_x

        for opposite_id, opposite_collider in self._em.get_entities_by_component(
            RectangleColliderComponent
        ).items():
            if parent is not None and parent == opposite_id:
                continue
            if opposite_id in children:
                continue
            if opposite_id == entity_id:
                continue

            self._info.continuous_calculations_counter += 1

            opposite_position, opposite_scale = self._em.get_absolute_transform(opposite_id)
            e_main, e_half, e_cross, e_cross_half = extents(
                entity_position, entity_scale, entity_collider
            )
            o_main, o_half, o_cross, o_cross_half = extents(
                opposite_position, opposite_scale, opposite_collider
            )

            # The cross-axis extents are truncated to whole units.
            entity_start = int(e_cross - e_cross_half)
            entity_end = int(e_cross + e_cross_half)
            opposite_start = int(o_cross - o_cross_half)
            opposite_end = int(o_cross + o_cross_half)
            if not (entity_start < opposite_end and opposite_start < entity_end):
                continue

            if direction == Direction.POSITIVE:
                difference = (o_main - o_half) - (e_main + e_half)
            else:
                difference = (o_main + o_half) - (e_main - e_half)

            if entity_collider.is_trigger or opposite_collider.is_trigger:
                if not self.has_trigger_exception(
                    self._em.get_tags(entity_id), self._em.get_tags(opposite_id)
                ):
                    continue

            if direction == Direction.POSITIVE:
                if difference >= 0 and collision.space_left > difference:
                    collision.space_left = difference
                    collision.opposite_id = opposite_id
            else:
                if difference <= 0 and collision.space_left < difference:
                    collision.space_left = difference
                    collision.opposite_id = opposite_id
        return collision
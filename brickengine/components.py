"""Component types that entities are built from."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable

from brickengine.enums import Direction, Kinematic


@dataclass
class Position:
    """A point in 2D space."""

    x: float
    y: float


@dataclass
class Scale:
    """A 2D scale factor."""

    x: float
    y: float


class Component:
    """Base class of all components; identified by their type name."""

    def get_name(self) -> str:
        return type(self).__name__


@dataclass
class AnimationComponent(Component):
    """Spritesheet animation state."""

    # How often the sprite should change, in seconds
    update_time: float
    # Number of sprites in the spritesheet
    sprite_size: int
    time: float = 0.0
    seconds: int = 0
    sprite: int = 0


@dataclass
class ClickComponent(Component):
    """Clickable area that calls ``fn`` when clicked."""

    fn: Callable[[], Any]
    x_scale: float
    y_scale: float


@dataclass(frozen=True)
class CollisionDetectionType:
    """Which collision detection strategies apply to an entity."""

    discrete: bool
    continuous: bool

    def is_discrete(self) -> bool:
        return self.discrete

    def is_continuous(self) -> bool:
        return self.continuous

    def is_both(self) -> bool:
        return self.discrete and self.continuous


@dataclass
class PhysicsComponent(Component):
    """Physical properties and velocity of an entity.

    For a parent only the direction is flipped by ``flip_x``/``flip_y``;
    for a child both direction and position are flipped.
    """

    mass: float
    drag: bool
    vx: float
    vy: float
    gravity: bool
    kinematic: Kinematic
    flip_x: bool
    flip_y: bool
    collision_detection: CollisionDetectionType


@dataclass
class PlayerComponent(Component):
    """Marks an entity as controlled by a player."""

    player_id: int
    name: str
    disabled: bool = False


@dataclass
class TransformComponent(Component):
    """Position, scale and facing of an entity."""

    x_pos: float
    y_pos: float
    x_scale: float
    y_scale: float
    x_direction: Direction
    y_direction: Direction


@dataclass
class RectangleColliderComponent(Component):
    """Rectangular collider, scaled relative to the entity's transform."""

    x_scale: float
    y_scale: float
    z_scale: float
    # A trigger can be moved through and only reports contact
    is_trigger: bool
    should_displace: bool


@dataclass
class TextureComponent(Component):
    """Owns a texture; copying the component copies the texture too."""

    texture: Any = field()

    def __copy__(self) -> "TextureComponent":
        return TextureComponent(copy.copy(self.texture))
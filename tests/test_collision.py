import math
import sys

import pytest

from brickengine.collision import (
    Collision,
    CollisionDetector,
    CollisionDetectorInfo,
)
from brickengine.components import (
    CollisionDetectionType,
    PhysicsComponent,
    Position,
    RectangleColliderComponent,
    Scale,
)
from brickengine.enums import Axis, Direction, Kinematic


class FakeEntityManager:
    def __init__(self):
        self.positions = {}
        self.scales = {}
        self.colliders = {}
        self.physics = {}
        self.parents = {}
        self.tags = {}

    def add(self, entity_id, x, y, w, h, *, is_trigger=False, tags=(), parent=None,
            discrete=True, continuous=False):
        self.positions[entity_id] = Position(x, y)
        self.scales[entity_id] = Scale(w, h)
        self.colliders[entity_id] = RectangleColliderComponent(1, 1, 1, is_trigger, True)
        self.physics[entity_id] = PhysicsComponent(
            1, False, 0, 0, False, Kinematic.IS_NOT_KINEMATIC, False, False,
            CollisionDetectionType(discrete, continuous),
        )
        self.parents[entity_id] = parent
        self.tags[entity_id] = set(tags)

    def move(self, entity_id, x, y):
        self.positions[entity_id] = Position(x, y)

    def get_component(self, entity_id, component_type):
        if component_type is RectangleColliderComponent:
            return self.colliders.get(entity_id)
        if component_type is PhysicsComponent:
            return self.physics.get(entity_id)
        return None

    def get_absolute_transform(self, entity_id):
        return self.positions[entity_id], self.scales[entity_id]

    def get_parent(self, entity_id):
        return self.parents[entity_id]

    def get_children(self, entity_id):
        return {eid for eid, parent in self.parents.items() if parent == entity_id}

    def get_entities_by_component(self, component_type):
        if component_type is RectangleColliderComponent:
            return dict(self.colliders)
        return {}

    def get_tags(self, entity_id):
        return self.tags[entity_id]


def test_trigger_exception_both_directions():
    detector = CollisionDetector({"player": {"platform"}}, FakeEntityManager())
    assert detector.has_trigger_exception({"player"}, {"platform"}) is True
    assert detector.has_trigger_exception({"platform"}, {"player"}) is True
    assert detector.has_trigger_exception({"player"}, {"enemy"}) is False
    assert detector.has_trigger_exception(set(), set()) is False


def test_discrete_overlap_resolved_by_delta():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    em.add(2, 8, 0, 10, 10)
    detector = CollisionDetector({}, em)
    found = detector.detect_discrete_collision(1)
    assert len(found) == 1
    hit = found[0]
    assert hit.opposite_id == 2
    assert hit.is_trigger is False
    assert hit.normal == Position(-1, 0)
    assert hit.delta.y == 0
    em.move(1, em.positions[1].x + hit.delta.x, em.positions[1].y + hit.delta.y)
    assert detector.detect_discrete_collision(1) == []


def test_discrete_vertical_overlap_normal_on_y():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    em.add(2, 0, 8, 10, 10)
    found = CollisionDetector({}, em).detect_discrete_collision(1)
    assert len(found) == 1
    assert found[0].normal.x == 0
    assert found[0].delta.x == 0
    assert found[0].position.x == 0


def test_discrete_ignores_family_and_self():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    em.add(2, 1, 1, 10, 10, parent=1)
    em.add(3, 2, 2, 10, 10)
    em.parents[1] = 3
    assert CollisionDetector({}, em).detect_discrete_collision(1) == []


def test_discrete_trigger_flag_and_exception():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10, tags={"player"})
    em.add(2, 8, 0, 10, 10, is_trigger=True, tags={"coin"})
    assert CollisionDetector({}, em).detect_discrete_collision(1)[0].is_trigger is True
    detector = CollisionDetector({"player": {"coin"}}, em)
    assert detector.detect_discrete_collision(1)[0].is_trigger is False


def test_continuous_nothing_found_keeps_start_values():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    detector = CollisionDetector({}, em)
    right = detector.detect_continuous_collision(1, Axis.X, Direction.POSITIVE)
    left = detector.detect_continuous_collision(1, Axis.X, Direction.NEGATIVE)
    assert right.opposite_id is None and right.space_left == math.inf
    assert left.opposite_id is None and left.space_left == -sys.float_info.max


def test_continuous_picks_nearest_and_moving_makes_contact():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10, discrete=False, continuous=True)
    em.add(2, 20, 0, 10, 10)
    em.add(3, 50, 0, 10, 10)
    detector = CollisionDetector({}, em)
    result = detector.detect_continuous_collision(1, Axis.X, Direction.POSITIVE)
    assert result.opposite_id == 2
    assert result.space_left > 0
    assert detector.detect_collision(1) == []
    em.move(1, result.space_left, 0)
    assert detector.detect_collision(1) == [Collision(2, False)]


def test_continuous_negative_y_axis():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10, discrete=False, continuous=True)
    em.add(2, 0, -30, 10, 10)
    detector = CollisionDetector({}, em)
    result = detector.detect_continuous_collision(1, Axis.Y, Direction.NEGATIVE)
    assert result.opposite_id == 2
    assert result.space_left < 0
    assert detector.detect_continuous_collision(1, Axis.Y, Direction.POSITIVE).opposite_id is None
    em.move(1, 0, result.space_left)
    assert detector.detect_collision(1) == [Collision(2, False)]


def test_continuous_skips_triggers_without_exception():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10, tags={"player"})
    em.add(2, 20, 0, 10, 10, is_trigger=True, tags={"coin"})
    plain = CollisionDetector({}, em).detect_continuous_collision(1, Axis.X, Direction.POSITIVE)
    assert plain.opposite_id is None
    excepted = CollisionDetector({"coin": {"player"}}, em)
    assert excepted.detect_continuous_collision(1, Axis.X, Direction.POSITIVE).opposite_id == 2


def test_detect_collision_discrete_reports_overlap():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    em.add(2, 5, 5, 10, 10, is_trigger=True)
    assert CollisionDetector({}, em).detect_collision(1) == [Collision(2, True)]


def test_info_counts_and_invalidates():
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    em.add(2, 100, 0, 10, 10)
    em.add(3, 200, 0, 10, 10)
    detector = CollisionDetector({}, em)
    assert detector.get_info() == CollisionDetectorInfo(0, 0)
    detector.detect_discrete_collision(1)
    detector.detect_continuous_collision(1, Axis.X, Direction.POSITIVE)
    info = detector.get_info()
    assert info.discrete_calculated_counter == 2
    assert info.continuous_calculations_counter == 2
    info.discrete_calculated_counter = 99
    assert detector.get_info().discrete_calculated_counter == 2
    detector.invalidate_info()
    assert detector.get_info() == CollisionDetectorInfo()


@pytest.mark.parametrize("axis", [Axis.X, Axis.Y])
def test_continuous_ignores_children(axis):
    em = FakeEntityManager()
    em.add(1, 0, 0, 10, 10)
    em.add(2, 30, 30, 10, 10, parent=1)
    em.add(4, 30, 0, 10, 10)
    em.add(5, 0, 30, 10, 10)
    result = CollisionDetector({}, em).detect_continuous_collision(1, axis, Direction.POSITIVE)
    assert result.opposite_id in {4, 5}
    assert result.opposite_id != 2
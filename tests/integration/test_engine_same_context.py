from token_traveler.engine import TravelerEngine
from token_traveler.scheduler import ManualScheduler
from token_traveler.store import TravelerStore
from token_traveler.types import Outcome
from tests.test_utils import (
    assert_entity_positions,
    make_engine,
    make_travel_scene,
    step_onto,
)

THREE_STOPS = [
    ("page1", (100, 100), "City", 1, None),
    ("page1", (400, 100), "City", 2, None),
    ("page1", (700, 100), "City", 3, None),
]


def test_stepping_on_marker_moves_to_next_node() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, _, notifier, camera = make_engine(scene)

    result = step_onto(engine, host, token_id, 400, 100)

    assert result is not None
    assert result.outcome == Outcome.MOVED
    assert result.entity_id == token_id
    assert result.destination.node_id == 3
    assert_entity_positions(host.scene, {token_id: (700, 100)})
    assert [n.outcome for n in notifier.notifications] == [Outcome.MOVED]
    assert notifier.notifications[0].node_id == 2
    assert notifier.notifications[0].destination_node_id == 3
    assert camera.calls == []


def test_arrival_does_not_retrigger_until_cooldown_expires() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, scheduler, _, _ = make_engine(scene)

    step_onto(engine, host, token_id, 700, 100)
    assert_entity_positions(host.scene, {token_id: (100, 100)})

    # Position change caused by the relocation itself
    assert engine.on_position_change(token_id) is None
    assert_entity_positions(host.scene, {token_id: (100, 100)})

    scheduler.advance(1500)
    result = engine.on_position_change(token_id)
    assert result is not None
    assert_entity_positions(host.scene, {token_id: (400, 100)})


def test_moving_outside_zones_does_nothing() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, _, notifier, _ = make_engine(scene)
    assert step_onto(engine, host, token_id, 250, 250) is None
    assert notifier.notifications == []


def test_marker_moving_itself_is_ignored() -> None:
    scene, marker_ids, _ = make_travel_scene(THREE_STOPS)
    engine, host, _, _, _ = make_engine(scene)
    assert step_onto(engine, host, marker_ids[0], 400, 100) is None
    assert_entity_positions(host.scene, {marker_ids[0]: (400, 100)})


def test_descending_marker() -> None:
    scene, _, token_id = make_travel_scene(
        [
            ("page1", (100, 100), "Tower", 1, "descending"),
            ("page1", (400, 100), "Tower", 2, "descending"),
            ("page1", (700, 100), "Tower", 3, "descending"),
        ]
    )
    engine, host, _, _, _ = make_engine(scene)
    step_onto(engine, host, token_id, 100, 100)
    assert_entity_positions(host.scene, {token_id: (700, 100)})


def test_odd_even_chain() -> None:
    scene, _, token_id = make_travel_scene(
        [
            ("page1", (100, 100), "Stairs", 1, "odd-even"),
            ("page1", (300, 100), "Stairs", 2, "odd-even"),
            ("page1", (500, 100), "Stairs", 3, "odd-even"),
            ("page1", (700, 100), "Stairs", 4, "odd-even"),
        ]
    )
    engine, host, scheduler, _, _ = make_engine(scene)
    step_onto(engine, host, token_id, 300, 100)
    assert_entity_positions(host.scene, {token_id: (700, 100)})
    scheduler.advance(1500)
    engine.on_position_change(token_id)
    assert_entity_positions(host.scene, {token_id: (300, 100)})


def test_random_single_node_does_not_move_or_arm() -> None:
    scene, _, token_id = make_travel_scene([("page1", (100, 100), "Lone", 1, "random")])
    engine, host, _, notifier, _ = make_engine(scene)
    assert step_onto(engine, host, token_id, 100, 100) is None
    assert not engine.cooldown.is_cooling_down(token_id, "Hero")
    assert notifier.notifications == []


def test_random_picks_other_node() -> None:
    scene, _, token_id = make_travel_scene(
        [
            ("page1", (100, 100), "Maze", 1, "random"),
            ("page1", (400, 100), "Maze", 2, "random"),
            ("page1", (700, 100), "Maze", 3, "random"),
        ]
    )
    engine, host, _, _, _ = make_engine(scene)
    result = step_onto(engine, host, token_id, 400, 100)
    assert result.destination.node_id in (1, 3)


def test_disabled_notifications_still_relocate() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, _, notifier, _ = make_engine(scene)
    engine.notifications.disable()
    result = step_onto(engine, host, token_id, 100, 100)
    assert result.outcome == Outcome.MOVED
    assert_entity_positions(host.scene, {token_id: (400, 100)})
    assert notifier.notifications == []


def test_substring_group_merges_overlapping_names() -> None:
    scene, _, token_id = make_travel_scene(
        [
            ("page1", (100, 100), "City", 1, None),
            ("page1", (400, 100), "OldCity", 2, None),
        ]
    )
    engine, host, _, _, _ = make_engine(scene)
    step_onto(engine, host, token_id, 100, 100)
    assert_entity_positions(host.scene, {token_id: (400, 100)})


def test_external_store_reset_is_recovered() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, _, _, _ = make_engine(scene)
    step_onto(engine, host, token_id, 100, 100)
    host.persistent.clear()

    # Cooldown state is gone with the store; the next event is evaluated again
    result = engine.on_position_change(token_id)
    assert result is not None
    assert_entity_positions(host.scene, {token_id: (700, 100)})
    assert engine.notifications.enabled


def test_stale_cooldowns_are_dropped_on_startup() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, _, _, _ = make_engine(scene)
    step_onto(engine, host, token_id, 100, 100)

    restarted = TravelerEngine(host, ManualScheduler())
    assert not restarted.cooldown.is_cooling_down(token_id, "Hero")


def test_shared_store_keeps_live_cooldowns() -> None:
    scene, _, token_id = make_travel_scene(THREE_STOPS)
    engine, host, scheduler, _, _ = make_engine(scene)
    step_onto(engine, host, token_id, 100, 100)

    second = TravelerEngine(host, scheduler, store=engine.store)
    assert second.cooldown.is_cooling_down(token_id, "Hero")

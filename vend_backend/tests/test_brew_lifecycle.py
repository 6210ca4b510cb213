from __future__ import annotations

import pytest
from pydantic import ValidationError

from vend_backend.app.schemas import BrewStatus, CoffeeType
from vend_backend.app.services.data_stores import FleetStore
from vend_backend.app.services.lifecycle import ManualScheduler


def _brew(store, machine_id="m-1", coffee_type="latte", **extra):
    return store.create_brew({"machineId": machine_id, "coffeeType": coffee_type, **extra})


def test_brew_starts_pending_with_timestamp(store, scheduler):
    brew = _brew(store, customerName="Ada")
    assert brew.status is BrewStatus.PENDING
    assert brew.coffee_type is CoffeeType.LATTE
    assert brew.customer_name == "Ada"
    assert brew.created_at == scheduler.now()
    assert store.get_brew(brew.id).status is BrewStatus.PENDING


def test_pending_then_brewing_then_completed(store, scheduler):
    brew = _brew(store)
    seen = [store.get_brew(brew.id).status]

    scheduler.advance(0.999)
    seen.append(store.get_brew(brew.id).status)
    scheduler.advance(0.001)                     # t = 1s
    seen.append(store.get_brew(brew.id).status)
    scheduler.advance(29.999)
    seen.append(store.get_brew(brew.id).status)
    scheduler.advance(0.001)                     # t = 31s
    seen.append(store.get_brew(brew.id).status)
    scheduler.advance(3600)
    seen.append(store.get_brew(brew.id).status)

    assert seen == [
        BrewStatus.PENDING, BrewStatus.PENDING,
        BrewStatus.BREWING, BrewStatus.BREWING,
        BrewStatus.COMPLETED, BrewStatus.COMPLETED,
    ]
    assert BrewStatus.FAILED not in seen
    assert scheduler.pending() == 0


def test_one_big_advance_runs_the_whole_chain(store, scheduler):
    brew = _brew(store)
    ran = scheduler.advance(31)
    assert ran == 2
    assert store.get_brew(brew.id).status is BrewStatus.COMPLETED


def test_brews_progress_independently(store, scheduler):
    first = _brew(store)
    scheduler.advance(20)
    second = _brew(store, coffee_type="espresso")
    scheduler.advance(11)                        # first at 31s, second at 11s
    assert store.get_brew(first.id).status is BrewStatus.COMPLETED
    assert store.get_brew(second.id).status is BrewStatus.BREWING


def test_machine_is_not_touched_by_a_completed_brew(store, scheduler, fleet):
    machine = fleet[0]
    _brew(store, machine_id=machine.id)
    scheduler.advance(60)
    after = store.get_machine(machine.id)
    assert after == machine


def test_vanished_brew_transitions_are_noops(store, scheduler):
    brew = _brew(store)
    store.reset()
    scheduler.advance(60)                        # must not raise
    assert store.get_brew(brew.id) is None
    assert scheduler.pending() == 0


def test_brew_for_unknown_machine_is_accepted(store):
    brew = _brew(store, machine_id="no-such-machine")
    assert store.get_brew(brew.id) is not None


def test_invalid_coffee_type_is_rejected(store, scheduler):
    with pytest.raises(ValidationError):
        _brew(store, coffee_type="mocha-frappe-deluxe")
    assert store.list_brews() == []
    assert scheduler.pending() == 0


def test_list_by_machine_is_exact(store):
    a1 = _brew(store, machine_id="a")
    a2 = _brew(store, machine_id="a", coffee_type="espresso")
    _brew(store, machine_id="b")

    assert {b.id for b in store.list_brews_by_machine("a")} == {a1.id, a2.id}
    assert store.list_brews_by_machine("ghost") == []
    assert len(store.list_brews()) == 3


def test_custom_delays(scheduler):
    s = FleetStore(scheduler, brewing_delay_s=5, completion_delay_s=10)
    brew = s.create_brew({"machineId": "m", "coffeeType": "cappuccino"})
    scheduler.advance(4)
    assert s.get_brew(brew.id).status is BrewStatus.PENDING
    scheduler.advance(1)
    assert s.get_brew(brew.id).status is BrewStatus.BREWING
    scheduler.advance(10)
    assert s.get_brew(brew.id).status is BrewStatus.COMPLETED


def test_manual_scheduler_rejects_going_backwards():
    with pytest.raises(ValueError):
        ManualScheduler().advance(-1)

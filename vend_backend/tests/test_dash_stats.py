from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from vend_backend.app.services.router_helpers.dash_helpers import analytics_summary, money


def test_dashboard_stats_on_four_machine_fleet(store, fleet):
    stats = store.dashboard_stats()
    assert stats == {
        "totalMachines": 4,
        "onlineMachines": 2,
        "lowStockMachines": 2,
        "totalRevenue": "381.35",
    }
    exact = sum((m.revenue_today for m in fleet), Decimal("0"))
    assert Decimal(stats["totalRevenue"]) == exact


def test_revenue_sum_has_no_float_drift(store):
    for _ in range(10):
        store.create_machine({"name": "n", "location": "l", "revenueToday": "0.10"})
    assert store.dashboard_stats()["totalRevenue"] == "1.00"


def test_low_stock_counts_any_supply_under_threshold(store):
    store.create_machine({"name": "beans", "location": "x", "coffeeBeans": 29})
    store.create_machine({"name": "milk", "location": "x", "milk": 0})
    store.create_machine({"name": "water", "location": "x", "water": 10})
    store.create_machine({"name": "edge", "location": "x", "coffeeBeans": 30, "milk": 30, "water": 30})
    assert store.dashboard_stats()["lowStockMachines"] == 3


def test_empty_fleet(store):
    assert store.dashboard_stats() == {
        "totalMachines": 0, "onlineMachines": 0, "lowStockMachines": 0, "totalRevenue": "0.00",
    }


def test_stats_are_recomputed_each_call(store, fleet):
    before = store.dashboard_stats()["onlineMachines"]
    store.update_machine(fleet[0].id, {"status": "offline"})
    assert store.dashboard_stats()["onlineMachines"] == before - 1


def test_admin_stats(store, fleet):
    stats = store.admin_stats()
    assert stats["totalMachines"] == 4
    assert stats["onlineMachines"] == 2
    assert stats["offlineMachines"] == 1
    assert stats["maintenanceMachines"] == 1
    assert stats["maintenanceAlerts"] == 1
    assert stats["lowStockAlerts"] == 2
    assert stats["todayRevenue"] == "381.35"
    assert stats["totalRevenue"] == "11440.50"      # x30 placeholder
    assert stats["todayCups"] == 127
    assert stats["totalCups"] == 127 * 30
    assert stats["averageUptime"] == 99.2
    assert stats["revenueGrowth"] == 12.5


def test_money_rounds_half_up_to_two_places():
    assert money(Decimal("1.005")) == "1.01"
    assert money(Decimal("2")) == "2.00"


def test_analytics_summary_groups_by_type_and_day(store, scheduler):
    now = scheduler.now()
    rows = [
        ("latte", now, "9.00", 2),
        ("latte", now - timedelta(days=1), "4.50", 1),
        ("espresso", now, "3.00", 1),
    ]
    for coffee_type, date, revenue, cups in rows:
        store.create_analytics_entry({
            "machineId": "m1", "date": date, "coffeeType": coffee_type, "revenue": revenue, "cups": cups,
        })

    summary = store.analytics_summary("m1", days=7)

    assert summary["totalCups"] == 4
    assert summary["totalRevenue"] == "16.50"
    assert summary["byCoffeeType"] == {
        "espresso": {"cups": 1, "revenue": "3.00"},
        "latte": {"cups": 3, "revenue": "13.50"},
    }
    assert [d["date"] for d in summary["byDay"]] == ["2026-02-28", "2026-03-01"]
    assert summary["byDay"][1] == {"date": "2026-03-01", "cups": 3, "revenue": "12.00"}


def test_analytics_summary_of_nothing():
    assert analytics_summary([]) == {"totalCups": 0, "totalRevenue": "0.00", "byCoffeeType": {}, "byDay": []}

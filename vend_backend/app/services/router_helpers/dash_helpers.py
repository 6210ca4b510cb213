# vend_backend/app/services/router_helpers/dash_helpers.py
from __future__ import annotations

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List

from vend_backend.app.models.fleet import AnalyticsEntry, Machine
from vend_backend.app.schemas import MachineStatus

_CENTS = Decimal("0.01")

# Placeholder extrapolation used by the admin overview: today's figures x 30.
# analytics_summary() is the real historical rollup.
MONTHLY_FACTOR = 30
AVERAGE_UPTIME_PCT = 99.2
REVENUE_GROWTH_PCT = 12.5


def money(value: Decimal) -> str:
    """Decimal -> '1234.50' (always two places, half-up)."""
    return str(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def _count(machines: List[Machine], status: MachineStatus) -> int:
    return sum(1 for m in machines if m.status == status)


def _revenue_today(machines: List[Machine]) -> Decimal:
    return sum((m.revenue_today for m in machines), Decimal("0"))


def dashboard_stats(machines: Iterable[Machine], low_stock_threshold: int = 30) -> Dict[str, Any]:
    """Facility dashboard tiles, computed from the current machine snapshot."""
    ms = list(machines)
    return {
        "totalMachines": len(ms),
        "onlineMachines": _count(ms, MachineStatus.ONLINE),
        "lowStockMachines": sum(1 for m in ms if m.is_low_stock(low_stock_threshold)),
        "totalRevenue": money(_revenue_today(ms)),
    }


def admin_stats(machines: Iterable[Machine], low_stock_threshold: int = 30) -> Dict[str, Any]:
    """
    Admin overview. `totalRevenue` and `totalCups` are today's totals times 30,
    not a real monthly sum; uptime and growth are fixed figures.
    """
    ms = list(machines)
    revenue = _revenue_today(ms)
    cups = sum(m.cups_today for m in ms)
    maintenance = _count(ms, MachineStatus.MAINTENANCE)
    return {
        "totalMachines": len(ms),
        "onlineMachines": _count(ms, MachineStatus.ONLINE),
        "offlineMachines": _count(ms, MachineStatus.OFFLINE),
        "maintenanceMachines": maintenance,
        "totalRevenue": money(revenue * MONTHLY_FACTOR),
        "todayRevenue": money(revenue),
        "totalCups": cups * MONTHLY_FACTOR,
        "todayCups": cups,
        "averageUptime": AVERAGE_UPTIME_PCT,
        "lowStockAlerts": sum(1 for m in ms if m.is_low_stock(low_stock_threshold)),
        "maintenanceAlerts": maintenance,
        "revenueGrowth": REVENUE_GROWTH_PCT,
    }


def analytics_summary(entries: Iterable[AnalyticsEntry]) -> Dict[str, Any]:
    """Totals over analytics entries, split by coffee type and by UTC day (oldest first)."""
    by_type: Dict[str, Dict[str, Any]] = defaultdict(lambda: {"cups": 0, "revenue": Decimal("0")})
    by_day: Dict[str, Dict[str, Any]] = defaultdict(lambda: {"cups": 0, "revenue": Decimal("0")})
    total_cups = 0
    total_revenue = Decimal("0")

    for e in entries:
        total_cups += e.cups
        total_revenue += e.revenue
        for bucket in (by_type[e.coffee_type.value], by_day[e.date.date().isoformat()]):
            bucket["cups"] += e.cups
            bucket["revenue"] += e.revenue

    return {
        "totalCups": total_cups,
        "totalRevenue": money(total_revenue),
        "byCoffeeType": {
            k: {"cups": v["cups"], "revenue": money(v["revenue"])}
            for k, v in sorted(by_type.items())
        },
        "byDay": [
            {"date": day, "cups": v["cups"], "revenue": money(v["revenue"])}
            for day, v in sorted(by_day.items())
        ],
    }

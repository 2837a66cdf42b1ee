from __future__ import annotations

from typing import Callable, Dict

# Absorbing maximum used for forbidden pairs and any cost built from one.
FORBIDDEN: int = 2**63 - 1

CostStrategy = Callable[[int, int, int], int]


def is_forbidden(value: int) -> bool:
    return value >= FORBIDDEN


def sat_add(a: int, b: int) -> int:
    if a >= FORBIDDEN or b >= FORBIDDEN:
        return FORBIDDEN
    return min(a + b, FORBIDDEN)


def sat_square(a: int) -> int:
    if a >= FORBIDDEN:
        return FORBIDDEN
    return min(a * a, FORBIDDEN)


def sat_sum(values) -> int:
    total = 0
    for v in values:
        total = sat_add(total, v)
        if total >= FORBIDDEN:
            return FORBIDDEN
    return total


def squared_cost(a: int, b: int, weight: int) -> int:
    # Repeat meetings grow super-linearly: a third meeting costs 4, a fourth 9
    return sat_square(weight)


def leader_bias_cost(leader_count: int) -> CostStrategy:
    """Squared cost with a small reward for pairing a leader with a newcomer.

    A pair that has never met and contains a leader costs -1 instead of 0.
    Forbidden pairs stay forbidden.
    """

    def cost(a: int, b: int, weight: int) -> int:
        if weight == 0 and (a < leader_count or b < leader_count):
            return -1
        return sat_square(weight)

    return cost


STRATEGIES = ("squared", "leader_bias")


def get_strategy(name: str, leader_count: int = 0) -> CostStrategy:
    factories: Dict[str, Callable[[], CostStrategy]] = {
        "squared": lambda: squared_cost,
        "leader_bias": lambda: leader_bias_cost(leader_count),
    }
    try:
        return factories[name]()
    except KeyError:
        raise ValueError(
            f"Unknown cost strategy {name!r}; expected one of {', '.join(STRATEGIES)}"
        ) from None


def format_cost(value: int) -> str:
    return "inf" if is_forbidden(value) else str(value)

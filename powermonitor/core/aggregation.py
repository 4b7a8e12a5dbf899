"""Folding finalized activities into per-identifier data points."""

from __future__ import annotations
from typing import Dict, Iterable, List

from .activity import MethodActivity
from .measurement import DataPoint
from .units import DEFAULT_CO2_EMISSION_FACTOR, Unit, co2_grams


def aggregate_activities(
    activities: Iterable[MethodActivity],
    as_filtered: bool = False,
    emission_factor: float = DEFAULT_CO2_EMISSION_FACTOR,
) -> Dict[str, DataPoint]:
    """Build the mapping handed to a results writer for one reporting cycle.

    Activities without a quantity yet, or without an identifier, are
    skipped. Quantities sharing an identifier are summed; the resulting
    data point carries thread and time of the most recent activity.

    Args:
        activities: Activities collected during the cycle
        as_filtered: Group by filtered (coarser) identifier
        emission_factor: g CO2/kWh used for energy data points

    Returns:
        Mapping of identifier to DataPoint

    Raises:
        ValueError: If one identifier mixes different units
    """
    groups: Dict[str, List[MethodActivity]] = {}
    for activity in activities:
        if not activity.is_finalized():
            continue
        identifier = activity.get_identifier(as_filtered)
        if identifier is None:
            continue
        groups.setdefault(identifier, []).append(activity)

    result: Dict[str, DataPoint] = {}
    for identifier, group in groups.items():
        unit = group[0].represented_quantity.unit
        total = 0.0
        for activity in group:
            quantity = activity.represented_quantity
            if quantity.unit is not unit:
                raise ValueError(
                    f"Mixed units for {identifier!r}: {unit.name} and {quantity.unit.name}"
                )
            total += quantity.value

        latest = max(group, key=lambda a: a.get_system_time())
        co2_value = co2_grams(total, emission_factor) if unit is Unit.JOULE else None
        result[identifier] = DataPoint(
            system_time=latest.get_system_time(),
            time=latest.time,
            thread_name=latest.thread_name,
            name=identifier,
            value=total,
            unit=unit,
            co2_value=co2_value,
        )
    return result

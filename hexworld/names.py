from __future__ import annotations

"""Unique, seed-stable settlement names themed by type and specialization."""

import random
from typing import Dict, List, Optional, Set

from .buildings import Specialization
from .noise import CHANNEL_NAMES, stable_hash

CITY_PREFIXES = [
    "Kings", "Queens", "Lords", "Merchants", "Traders", "Masters",
    "High", "New", "Old", "Grand", "Great", "Royal", "Imperial",
]
CITY_ROOTS = [
    "haven", "port", "bridge", "cross", "gate", "way", "bury",
    "stead", "ton", "ford", "castle", "hall", "keep", "crown",
]
VILLAGE_PREFIXES = [
    "Green", "Oak", "Elm", "Pine", "River", "Stone", "Mill",
    "Brook", "Hill", "Dale", "Meadow", "Marsh", "Lake", "Wood",
]
VILLAGE_SUFFIXES = [
    "vale", "brook", "field", "wood", "glen", "ton", "ham",
    "ford", "bridge", "mill", "hollow", "ridge", "creek", "run",
]
HAMLET_PREFIXES = [
    "Little", "Upper", "Lower", "East", "West", "North", "South",
    "Sunny", "Rocky", "Misty", "Quiet", "Windy", "Foggy", "Cold",
]
HAMLET_NAMES = [
    "Thorp", "Dell", "Cove", "Nook", "Rest", "End", "Corner",
    "Bend", "Point", "Gap", "Pass", "Ridge", "Peak", "Vale",
]

THEMED_WORDS: Dict[Specialization, List[str]] = {
    Specialization.MINING: ["Iron", "Copper", "Silver", "Gold", "Stone", "Coal", "Ore", "Rock"],
    Specialization.FARMING: ["Harvest", "Grain", "Wheat", "Field", "Farm", "Crop", "Seed"],
    Specialization.FISHING: ["Fisher", "Anchor", "Wave", "Bay", "Dock", "Net", "Tide"],
    Specialization.TRADING: ["Market", "Fair", "Trade", "Merchant", "Exchange", "Plaza"],
    Specialization.LUMBER: ["Timber", "Log", "Forest", "Grove", "Lumber", "Cedar", "Pine"],
}

_MAX_ATTEMPTS = 100


class SettlementNameGenerator:
    """Hands out names that are unique within one generated world."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self.used_names: Set[str] = set()

    def reset(self) -> None:
        self.used_names.clear()

    def generate_name(
        self,
        settlement_type: str,
        settlement_id: int,
        specialization: Optional[Specialization] = None,
    ) -> str:
        rng = random.Random(stable_hash(self.seed, CHANNEL_NAMES, settlement_id))
        for _ in range(_MAX_ATTEMPTS):
            name = self._compose(rng, settlement_type, specialization)
            if name not in self.used_names:
                self.used_names.add(name)
                return name
        return self._fallback(settlement_type)

    def _compose(
        self,
        rng: random.Random,
        settlement_type: str,
        specialization: Optional[Specialization],
    ) -> str:
        themed = THEMED_WORDS.get(specialization) if specialization else None
        if settlement_type == "city":
            return rng.choice(CITY_PREFIXES) + rng.choice(CITY_ROOTS)
        if settlement_type == "village":
            prefix = VILLAGE_PREFIXES
            if themed and rng.random() < 0.6:
                prefix = themed
            return rng.choice(prefix) + rng.choice(VILLAGE_SUFFIXES)
        descriptor = HAMLET_PREFIXES
        # Trading hamlets keep the plain descriptors
        if themed and specialization is not Specialization.TRADING and rng.random() < 0.5:
            descriptor = themed
        return f"{rng.choice(descriptor)} {rng.choice(HAMLET_NAMES)}"

    def _fallback(self, settlement_type: str) -> str:
        base, sep = {
            "city": ("Kingshaven", ""),
            "village": ("Greenwood", ""),
        }.get(settlement_type, ("Little Thorp", " "))
        i = 1
        while f"{base}{sep}{i}" in self.used_names:
            i += 1
        name = f"{base}{sep}{i}"
        self.used_names.add(name)
        return name


__all__ = ["SettlementNameGenerator"]

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Country:
    code: str
    name: str
    capital: str
    continent: str
    centroid: tuple[float, float]

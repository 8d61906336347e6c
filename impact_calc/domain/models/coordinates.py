from typing import NamedTuple


class Coordinates(NamedTuple):
    lat: float
    lon: float

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Show:
    id: int
    name: str
    summary: Optional[str]  # raw html from TVmaze, escape before display
    image: str


@dataclass(frozen=True)
class Episode:
    id: int
    name: str
    season: int
    number: int

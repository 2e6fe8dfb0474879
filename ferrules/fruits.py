"""Fruit baskets and football score tables built on dictionaries."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Fruit(enum.Enum):
    """Kinds of fruit a basket can hold."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 1, "orange": 2}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Put seven bananas and seven pineapples into the basket."""
    basket[Fruit.BANANA] = 7
    basket[Fruit.PINEAPPLE] = 7


@dataclass
class Team:
    """Goals a team scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str, line: str) -> int:
    try:
        value = int(text)
    except ValueError as err:
        raise ValueError(f"invalid goal count {text!r} in line {line!r}") from err
    if not 0 <= value <= 255:
        raise ValueError(f"goal count {value} out of range in line {line!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines 'team1,team2,goals1,goals2'."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _goals(fields[2], line)
        team_2_score = _goals(fields[3], line)

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores
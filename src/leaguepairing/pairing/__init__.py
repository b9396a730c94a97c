from leaguepairing.pairing.round_robin import (
    RoundRobin,
    circle_method_rounds,
    generate_fixtures,
    rounds_per_cycle,
    shuffle_rounds,
)

__all__ = [
    "RoundRobin",
    "circle_method_rounds",
    "generate_fixtures",
    "rounds_per_cycle",
    "shuffle_rounds",
]

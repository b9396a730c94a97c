from leaguepairing.controllers.tournament.result_recorder import (
    ResultRecorder,
    record_result,
)
from leaguepairing.controllers.tournament.round_manager import (
    RoundManager,
    assign_round_dates,
    group_by_round,
)
from leaguepairing.controllers.tournament.standings_calculator import (
    StandingsCalculator,
    compute_standings,
)

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "StandingsCalculator",
    "assign_round_dates",
    "compute_standings",
    "group_by_round",
    "record_result",
]

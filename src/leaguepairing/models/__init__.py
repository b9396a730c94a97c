from leaguepairing.models.fixture import Fixture
from leaguepairing.models.participant import Participant, create_participant
from leaguepairing.models.standings_row import StandingsRow
from leaguepairing.models.tournament_config import TournamentConfig

__all__ = [
    "Fixture",
    "Participant",
    "StandingsRow",
    "TournamentConfig",
    "create_participant",
]

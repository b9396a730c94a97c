"""Type hints used in League Pairing."""

from typing import Dict, List, Literal, Optional, Tuple

# Tournament format literals (for type hints)
Format = Literal["single", "double"]

# Fixture status literals
FixtureStatus = Literal["pending", "completed"]

# List of participants
Participants = List["Participant"]
# List of fixtures, in emission order
Fixtures = List["Fixture"]
# One round as produced by the circle method: (home, away) pairs
RoundPairings = List[Tuple["Participant", "Participant"]]
# Fixtures grouped under their round number
RoundGroups = Dict[int, List["Fixture"]]
# A (round, opponent, is_home, fixture) entry in a participant's schedule
ScheduleEntry = Tuple[int, Optional["Participant"], bool, Optional["Fixture"]]

#  LocalWords:  RoundPairings RoundGroups

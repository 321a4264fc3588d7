"""Type hints used in Swiss Pairing."""

from typing import Dict, List, Optional, Tuple

# Player arena keyed by player id
PlayerRegistry = Dict[str, "Player"]
# Two players matched for one round, before a Pairing is created
MatchPairing = Tuple["Player", "Player"]
# (pairing_id, home_name, away_name) as handed to the driver
PairingRow = Tuple[str, str, str]
# All rows for one round
RoundSchedule = List[PairingRow]
# (pairing_id, home_id, away_id) as stored in round history
PairingIDs = Tuple[str, str, str]
MaybePlayer = Optional["Player"]

#  LocalWords:  MatchPairing RoundSchedule PairingRow

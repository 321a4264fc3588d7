from swisspairing.models.pairing.match_result import MatchResult
from swisspairing.models.pairing.pairing import Pairing, PlayerSide

__all__ = ["MatchResult", "Pairing", "PlayerSide"]

from swisspairing.models.tournament.round_data import RoundData
from swisspairing.models.tournament.standing import Standing
from swisspairing.models.tournament.tournament_config import TournamentConfig

__all__ = ["RoundData", "Standing", "TournamentConfig"]

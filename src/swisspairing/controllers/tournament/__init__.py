from swisspairing.controllers.tournament.result_recorder import ResultRecorder
from swisspairing.controllers.tournament.round_manager import RoundManager
from swisspairing.controllers.tournament.tiebreak_calculator import TiebreakCalculator

__all__ = ["ResultRecorder", "RoundManager", "TiebreakCalculator"]

from .answers import AnswerValidator, Verdict
from .benefit import BenefitCalculator, classify
from .engine import LottoEngine
from .random_source import RandomNumberSource
from .rounds import RoundRegistry
from .tickets import TicketBook, TicketGenerator

__all__ = [
    "AnswerValidator",
    "BenefitCalculator",
    "LottoEngine",
    "RandomNumberSource",
    "RoundRegistry",
    "TicketBook",
    "TicketGenerator",
    "Verdict",
    "classify",
]

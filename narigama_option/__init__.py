from loguru import logger

from . import log
from . import op
from . import option
from . import problem
from .op import Op
from .option import Option
from .problem import AbsentValueError


# libraries stay quiet until the application opts in, see `log.install`
logger.disable(__name__)

__all__ = ["AbsentValueError", "Op", "Option", "log", "op", "option", "problem"]

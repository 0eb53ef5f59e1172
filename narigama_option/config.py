import dataclasses

from .util import env
from .util import to_bool


@dataclasses.dataclass(frozen=True)
class Config:
    log_enabled: bool = env("NARIGAMA_OPTION_LOG:false", convert=to_bool)
    log_level: str = env("NARIGAMA_OPTION_LOG_LEVEL:DEBUG", convert=str.upper)

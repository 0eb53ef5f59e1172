import dataclasses
import os

from .op import map_present
from .op import or_default
from .op import or_throw


TRUTHY = frozenset(("1", "true", "yes", "on"))


def to_bool(value: str) -> bool:
    """Convert an envvar string to a bool, anything not in TRUTHY is False."""
    return value.strip().lower() in TRUTHY


def env(key, convert=str, **kwargs):
    """
    A factory around `dataclasses.field` that can be used to load or default
    an envvar. If you wish to load from an external source, do that first and
    inject its keys/values into os.environ before instantiating your
    dataclass.

    Args:
        key: in the format of either KEY or KEY:DEFAULT
        convert: a function that accepts a string and returns a different type
        kwargs: any kwargs to be passed to `dataclasses.field`

    Returns:
        dataclasses.field

    Raises:
        KeyError: in the event an envvar isn't found and doesn't have a default
    """
    key, partition, default = key.partition(":")

    def default_factory(key=key, default=default, convert=convert):
        # if a partition was detected use anything after it, even an empty string
        fallback = default if partition == ":" else None
        value = or_default(os.environ.get(key), lambda: fallback)
        return or_throw(map_present(value, convert), lambda: KeyError(key))

    return dataclasses.field(default_factory=default_factory, **kwargs)

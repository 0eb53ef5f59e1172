"""
Errors raised by narigama_option, modelled loosely on RFC7807 problem details.
"""


class ProblemMeta(type):
    """The Problem Metaclass, this will validate your Problems."""

    def __new__(cls, class_name, parents, attrs):  # noqa: D102
        # create the class
        _cls = type.__new__(cls, class_name, parents, attrs)

        # don't validate Problem
        if class_name == "Problem":
            return _cls

        # ensure required fields, these may be inherited from another Problem
        missing = []
        for key in ("title", "kind"):
            if not hasattr(_cls, key):
                missing.append(key)

        if missing:
            fmt = "Can't build a Problem: {} is missing the field(s): {}"
            raise TypeError(fmt.format(class_name, ", ".join(missing)))

        # constructor
        def __init__(self, detail: str | None = None, context: dict | None = None):
            super(_cls, self).__init__(detail or self.title)
            self.detail = detail or "No detail provided"
            self.context = context

        # make it printable
        def __str__(self):
            fmt = "<{}(kind='{}', title='{}', detail='{}')>"
            return fmt.format(self.__class__.__name__, self.kind, self.title, self.detail)

        # serializer
        def to_dict(self) -> dict:
            data = {
                "kind": self.kind,  # a stable, machine readable identifier
                "title": self.title,  # a generic one liner about the issue
                "detail": self.detail,  # a more contextual one liner about the issue
            }

            # if provided, additional data for debugging, etc...
            if self.context:
                data["context"] = self.context

            return data

        # bolt methods on and return class
        _cls.__init__ = __init__
        _cls.__str__ = __str__
        _cls.to_dict = to_dict
        return _cls


class Problem(Exception, metaclass=ProblemMeta):
    """The Problem base class, extend this to build new Problems.

    class ConfigMissing(Problem):
        title = "A config value was missing"
        kind = "config-missing"

    raise ConfigMissing("DATABASE_URL was not set")
    """


class AbsentValueError(Problem, TypeError):
    """Raised by `or_throw` when an Op holds no value and no custom error was given."""

    title = "Op was absent."
    kind = "absent-value"

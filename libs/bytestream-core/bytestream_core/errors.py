from typing import Iterable, Iterator

from bytestream_core.settings import ERROR_DELIMITER

# ---------------------------------------------------------------------------- #
#                                Rule Violation                                #
# ---------------------------------------------------------------------------- #


class RuleViolation(Exception):
    """A single failed check. `str()` is the reason text."""

    rule: str
    message: str

    def __init__(self, rule: str, message: str):
        super().__init__(rule, message)
        self.rule = rule
        self.message = message

    def __str__(self):
        return self.message


# ---------------------------------------------------------------------------- #
#                               Aggregated Error                               #
# ---------------------------------------------------------------------------- #


class MultiError(Exception):
    """
    Ordered, immutable collection of independent failures that reads as one error.
    An empty aggregate is not a failure, therefore it cannot be constructed; use
    `MultiError.collect` at the point where a result is handed to the caller.
    """

    __reasons: tuple[Exception, ...]

    def __init__(self, reasons: Iterable[Exception]):
        reasons = tuple(reasons)
        if len(reasons) == 0:
            raise ValueError("MultiError requires at least one reason")
        self.__reasons = reasons
        # args must rebuild the instance for copy and pickle
        super().__init__(reasons)

    @classmethod
    def collect(cls, reasons: Iterable[Exception]) -> "MultiError | None":
        reasons = tuple(reasons)
        if len(reasons) == 0:
            return None
        return cls(reasons)

    @property
    def reasons(self) -> tuple[Exception, ...]:
        return self.__reasons

    @property
    def messages(self) -> list[str]:
        return [str(reason) for reason in self.__reasons]

    def describe(self) -> str:
        return ERROR_DELIMITER.join(self.messages)

    def __str__(self):
        return self.describe()

    def __len__(self):
        return len(self.__reasons)

    def __iter__(self) -> Iterator[Exception]:
        return iter(self.__reasons)

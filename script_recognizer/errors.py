from typing import Iterable


class ScriptRecognizerError(Exception):
    """Base class of every error raised by script_recognizer."""


class InvalidKeyError(ScriptRecognizerError, ValueError):
    def __init__(self):
        super().__init__(
            "The locale key must provide a script code and must not provide a region code."
        )


class InvalidRegionCodeError(ScriptRecognizerError, ValueError):
    def __init__(self):
        super().__init__(
            "At least one of the region codes is invalid and unable to be resolved."
        )


class InvalidArgumentError(ScriptRecognizerError, ValueError):
    pass


class RegionFormatError(ScriptRecognizerError, ValueError):
    """Custom region codes that are not two capital letters.

    The offending values are kept in ``codes``.
    """

    def __init__(self, codes: Iterable[str]):
        self.codes = frozenset(codes)
        super().__init__(
            "The region code should be 2 capital letters in a single string: "
            + ", ".join(sorted(map(repr, self.codes)))
        )


class UnsupportedOperationError(ScriptRecognizerError, NotImplementedError):
    pass


class NotInitializedError(ScriptRecognizerError, RuntimeError):
    pass

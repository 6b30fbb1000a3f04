# healthscribe/analysis/errors.py


class AnalysisError(Exception):
    """Base class for anything that stops a model call from producing a report."""


class ModelServiceError(AnalysisError):
    """The provider could not be reached, timed out, or sent back nothing."""


class ModelContractError(AnalysisError):
    """
    The provider answered, but the reply is not JSON or does not match the
    output schema.
    """

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw

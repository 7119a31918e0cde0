"""Initialization errors raised while building the NLU pipeline.

Any of these aborts startup: the process must not serve requests without a
trained model and a valid keyword rule table.
"""


class PipelineInitError(RuntimeError):
    """Base class for fatal boot-time failures."""


class TrainingError(PipelineInitError):
    """The training corpus is missing, empty or mislabeled."""


class RuleTableError(PipelineInitError):
    """The keyword rule table is malformed."""

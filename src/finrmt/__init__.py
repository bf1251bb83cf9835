"""RMT filtering of financial correlation matrices for community detection."""

from .errors import FinRMTError, InvalidInputError, NumericInstabilityError
from .network import build_modularity_network
from .workflow_filter import FilteredCorrResult, filter_correlation_matrix_full, fin_rmt
from .utils import *  # noqa: F401,F403
from .config.const import *  # noqa: F401,F403

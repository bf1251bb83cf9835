from .validation import validate_correlation_matrix, validate_observation_count
from .spectral import *  # noqa: F401,F403

"""Core building blocks shared by all features."""

from .exceptions import *  # noqa: F401,F403
from .validation import require_param, validate_path_segment

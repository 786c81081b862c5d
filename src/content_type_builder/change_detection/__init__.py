"""Change detection exports."""

from .change_set_detector import detect_changes

__all__ = ["detect_changes"]

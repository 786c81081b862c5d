"""Save request exports."""

from .request_contracts import SaveRequest, SaveRequestError
from .save_body_builder import build_save_body

__all__ = ["SaveRequest", "SaveRequestError", "build_save_body"]

"""Transformation framework.

This module provides the stage protocol and the pipeline that chains range
expansion and cipher mapping for a compile call.
"""

from .base import StageContext, StageResult, TransformerPort
from .pipeline import TransformationPipeline, describe_exception

__all__ = [
    "StageContext",
    "StageResult",
    "TransformationPipeline",
    "TransformerPort",
    "describe_exception",
]

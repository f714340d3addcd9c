"""Build-time HTML/CSS/JS optimize streams."""

from .models import AssetFile
from .transform import TransformPipeline, get_optimize_stages

__all__ = ["AssetFile", "TransformPipeline", "get_optimize_stages"]

"""
assets package
--------------
Explicit asset index: logical content paths to deployable URLs.
"""
from keepsake.assets.index import AssetIndex, hashed_name

__all__ = ["AssetIndex", "hashed_name"]

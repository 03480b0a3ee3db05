"""
dataclasses package
-------------------
Dataclass definitions for content entries.

- ContentEntry: One blog post, diary entry or memoir with resolved images
- ImageRef: A resolved image (filename, URL, alt text)
"""
from keepsake.dataclasses.content_entry import ContentEntry, ImageRef

__all__ = ["ContentEntry", "ImageRef"]

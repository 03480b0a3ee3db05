"""Collection resolution, grouping, page loaders and JSON export."""

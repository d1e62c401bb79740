"""Remote data sources."""

from .cat_source import RemoteCatSource, parse_fact, parse_image_url

__all__ = ["RemoteCatSource", "parse_fact", "parse_image_url"]

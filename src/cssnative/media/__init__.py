from cssnative.media.features import (
    DIMENSION_FEATURES,
    MEDIA_QUERY_FEATURES,
    MEDIA_QUERY_TYPES,
)
from cssnative.media.match import match_media
from cssnative.media.parser import parse_media_query

__all__ = [
    "DIMENSION_FEATURES",
    "MEDIA_QUERY_FEATURES",
    "MEDIA_QUERY_TYPES",
    "match_media",
    "parse_media_query",
]

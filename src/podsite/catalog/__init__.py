"""Audio catalog discovery from object storage."""

from podsite.catalog.fetcher import CatalogFetcher, parse_audio_number, parse_bucket_listing
from podsite.catalog.models import AudioEntry

__all__ = ["AudioEntry", "CatalogFetcher", "parse_audio_number", "parse_bucket_listing"]

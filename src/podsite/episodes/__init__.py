"""Episode reconciliation for podsite."""

from podsite.episodes.models import Episode
from podsite.episodes.naming import (
    expand_paragraphs,
    format_episode_date,
    parse_episode_number,
    parse_guest_name,
    parse_pub_date,
)
from podsite.episodes.reconcile import EpisodeReconciler

__all__ = [
    "Episode",
    "EpisodeReconciler",
    "expand_paragraphs",
    "format_episode_date",
    "parse_episode_number",
    "parse_guest_name",
    "parse_pub_date",
]

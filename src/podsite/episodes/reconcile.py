"""Join feed items with audio catalog entries."""

import logging
from collections.abc import Iterable, Sequence

from podsite.catalog.models import AudioEntry
from podsite.config.schema import CatalogLookup
from podsite.episodes.models import Episode
from podsite.episodes.naming import (
    expand_paragraphs,
    format_episode_date,
    parse_episode_number,
    parse_guest_name,
    parse_pub_date,
)
from podsite.feeds.models import FeedItem
from podsite.utils.errors import MalformedAudioNameError, MissingAudioError

logger = logging.getLogger(__name__)


class EpisodeReconciler:
    """Builds Episode records from feed items and the audio catalog.

    With ``lookup="index"`` the episode number is used as a position in the
    ascending catalog, so the catalog must be gapless and start at 0 for the
    numbers to line up. ``lookup="number"`` matches on ``AudioEntry.number``
    instead.

    Example:
        >>> reconciler = EpisodeReconciler(catalog)
        >>> episodes = reconciler.reconcile(feed.items)
    """

    def __init__(
        self,
        catalog: Sequence[AudioEntry],
        lookup: CatalogLookup = "index",
        skip_malformed: bool = False,
    ) -> None:
        """Initialize the reconciler.

        Args:
            catalog: Audio entries sorted ascending by number
            lookup: How episode numbers map to catalog entries
            skip_malformed: Skip items whose audio name has no guest instead of failing
        """
        self.catalog = list(catalog)
        self.lookup = lookup
        self.skip_malformed = skip_malformed

        self._by_number: dict[int, AudioEntry] = {}
        for entry in self.catalog:
            self._by_number.setdefault(entry.number, entry)

    def lookup_audio(self, number: int) -> AudioEntry:
        """Find the audio entry for an episode number.

        Raises:
            MissingAudioError: If no entry matches
        """
        if self.lookup == "number":
            entry = self._by_number.get(number)
            if entry is None:
                raise MissingAudioError(number, len(self.catalog))
            return entry

        if not 0 <= number < len(self.catalog):
            raise MissingAudioError(number, len(self.catalog))
        return self.catalog[number]

    def reconcile_item(self, item: FeedItem) -> Episode:
        """Build one Episode from a feed item.

        Raises:
            ParseError: If the title number or publish date can't be parsed
            MissingAudioError: If there's no audio for the episode
            MalformedAudioNameError: If the audio name yields no guest
        """
        number = parse_episode_number(item.title)
        published = parse_pub_date(item.pub_date)
        audio = self.lookup_audio(number)

        return Episode(
            number=number,
            title=item.title,
            date=format_episode_date(published),
            guid=item.guid,
            guest=parse_guest_name(audio.name),
            audio=audio.name,
            description=item.title,
            content=expand_paragraphs(item.description),
        )

    def reconcile(self, items: Iterable[FeedItem]) -> list[Episode]:
        """Reconcile all feed items.

        Args:
            items: Feed items

        Returns:
            Episodes sorted ascending by number
        """
        episodes = []
        for item in items:
            try:
                episodes.append(self.reconcile_item(item))
            except MalformedAudioNameError as e:
                if not self.skip_malformed:
                    raise
                logger.warning("Skipping '%s': %s", item.title, e)

        logger.info("Reconciled %d episodes", len(episodes))
        return sorted(episodes, key=lambda episode: episode.number)

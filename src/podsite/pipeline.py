"""Pipeline orchestration for regenerating the site.

Stages run strictly in order and any error aborts the run:

1. fetch the audio catalog
2. read the published feed
3. reconcile feed items with audio files
4. render episode pages
5. build the site
"""

import logging
from dataclasses import dataclass

from pydantic import BaseModel, Field

from podsite.catalog import AudioEntry, CatalogFetcher
from podsite.config.schema import SiteConfig
from podsite.episodes import Episode, EpisodeReconciler
from podsite.feeds import RSSParser
from podsite.output import PageRenderer, RenderedPage
from podsite.site import BuildResult, SiteBuilder

logger = logging.getLogger(__name__)


@dataclass
class PipelineOptions:
    """Per-run switches."""

    dry_run: bool = False
    build: bool = True


class PipelineResult(BaseModel):
    """Summary of one pipeline run."""

    catalog: list[AudioEntry] = Field(default_factory=list)
    episodes: list[Episode] = Field(default_factory=list)
    pages: list[RenderedPage] = Field(default_factory=list)
    build: BuildResult | None = None


class PipelineOrchestrator:
    """Runs the fetch, read, reconcile, render and build stages.

    Example:
        >>> orchestrator = PipelineOrchestrator(config)
        >>> result = orchestrator.run()
        >>> print(result.build.stdout)
    """

    def __init__(self, config: SiteConfig) -> None:
        self.config = config

    def load_episodes(self) -> tuple[list[AudioEntry], list[Episode]]:
        """Fetch the catalog and feed and reconcile them.

        Returns:
            The catalog and the episodes sorted ascending by number
        """
        config = self.config
        catalog = CatalogFetcher(config.bucket_url, timeout=config.request_timeout).fetch()
        feed = RSSParser().read(config.feed_file)

        reconciler = EpisodeReconciler(
            catalog,
            lookup=config.catalog_lookup,
            skip_malformed=config.skip_malformed_audio,
        )
        return catalog, reconciler.reconcile(feed.items)

    def run(self, options: PipelineOptions | None = None) -> PipelineResult:
        """Run the pipeline.

        Args:
            options: Stage switches (defaults: render and build)

        Returns:
            PipelineResult for the run

        Raises:
            PodsiteError: From whichever stage fails first
        """
        options = options or PipelineOptions()
        config = self.config
        logger.info("Starting from %s", config.root_path)

        catalog, episodes = self.load_episodes()
        result = PipelineResult(catalog=catalog, episodes=episodes)

        if not options.dry_run:
            renderer = PageRenderer(
                config.episode_path,
                hosts=config.hosts,
                image=config.image,
                layout=config.layout,
            )
            result.pages = renderer.write_pages(
                episodes, config.render_limit, config.render_order
            )
        else:
            logger.info("Dry run, no pages written")

        if options.build and not options.dry_run:
            result.build = SiteBuilder(config.root_path, config.build_command).build()

        return result

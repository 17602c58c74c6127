"""Page renderer for writing episode pages to the site's content directory.

Each episode becomes ``<episode_dir>/<number>.md``. An existing page is
removed first and the new one is written through a temp file and rename.
"""

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from jinja2 import TemplateError

from podsite.config.schema import RenderOrder
from podsite.episodes.models import Episode
from podsite.output.models import RenderedPage
from podsite.output.templates import EPISODE_TEMPLATE, compile_template
from podsite.utils.errors import RenderError

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"


def select_episodes(
    episodes: Sequence[Episode],
    limit: int,
    order: RenderOrder = "ascending",
) -> list[Episode]:
    """Pick the episodes to render in this run.

    ``ascending`` returns the ``limit`` lowest-numbered episodes, which is how
    pages have always been selected; ``descending`` returns the highest.

    Args:
        episodes: Reconciled episodes
        limit: Maximum number of pages to render
        order: Selection direction

    Returns:
        Selected episodes in selection order
    """
    ordered = sorted(episodes, key=lambda episode: episode.number, reverse=order == "descending")
    if order == "ascending" and len(ordered) > limit:
        logger.warning(
            "Rendering the %d lowest-numbered of %d episodes; "
            "set render_order: descending to render the newest",
            limit,
            len(ordered),
        )
    return ordered[:limit]


class PageRenderer:
    """Render episodes into front-matter pages.

    Example:
        >>> renderer = PageRenderer(episode_dir=Path("content/episode"))
        >>> pages = renderer.write_pages(episodes, limit=5)
        >>> print(pages[0].path)
        content/episode/1.md
    """

    def __init__(
        self,
        episode_dir: Path,
        hosts: Sequence[str] = ("volyx",),
        image: str = "images/logo.png",
        layout: str = "episode",
        template: str = EPISODE_TEMPLATE,
    ) -> None:
        """Initialize the renderer.

        Args:
            episode_dir: Directory holding episode pages
            hosts: People listed on every episode before the guest
            image: Page image path
            layout: Front-matter layout name
            template: Jinja2 page template source

        Raises:
            RenderError: If the template doesn't compile
        """
        self.episode_dir = episode_dir
        self.hosts = list(hosts)
        self.image = image
        self.layout = layout
        self.template = compile_template(template)

    def page_path(self, episode: Episode) -> Path:
        """Path of the page for an episode."""
        return self.episode_dir / f"{episode.number}{PAGE_SUFFIX}"

    def render(self, episode: Episode) -> str:
        """Render one episode page.

        Raises:
            RenderError: If the template fails to render
        """
        try:
            return self.template.render(
                episode=episode,
                layout=self.layout,
                image=self.image,
                people=[*self.hosts, episode.guest],
            )
        except TemplateError as e:
            raise RenderError(f"Failed to render episode {episode.number}: {e}") from e

    def write_page(self, episode: Episode) -> RenderedPage:
        """Render an episode and replace its page on disk.

        Returns:
            RenderedPage for the written file

        Raises:
            RenderError: If rendering or writing fails
        """
        content = self.render(episode)
        path = self.page_path(episode)

        try:
            self.episode_dir.mkdir(parents=True, exist_ok=True)
            path.unlink(missing_ok=True)
            self._write_file_atomic(path, content)
        except OSError as e:
            raise RenderError(f"Failed to write {path}: {e}") from e

        logger.info("Generated episode %d -> %s", episode.number, path)
        return RenderedPage(
            number=episode.number,
            path=path,
            size_bytes=len(content.encode("utf-8")),
        )

    def write_pages(
        self,
        episodes: Sequence[Episode],
        limit: int,
        order: RenderOrder = "ascending",
    ) -> list[RenderedPage]:
        """Render the selected episodes.

        Pages written before a failure are left in place.

        Args:
            episodes: Reconciled episodes
            limit: Maximum number of pages
            order: Selection direction, see select_episodes

        Returns:
            Written pages in the order they were rendered
        """
        return [self.write_page(episode) for episode in select_episodes(episodes, limit, order)]

    def _write_file_atomic(self, file_path: Path, content: str) -> None:
        """Write a file through a temp file in the same directory, then rename.

        Args:
            file_path: Target file path
            content: File content

        Raises:
            OSError: If write or rename fails
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_", suffix=PAGE_SUFFIX
        )

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            Path(temp_path).replace(file_path)
        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

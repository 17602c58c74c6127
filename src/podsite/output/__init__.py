"""Page rendering for podsite."""

from podsite.output.manager import PageRenderer, select_episodes
from podsite.output.models import RenderedPage
from podsite.output.templates import EPISODE_TEMPLATE, compile_template

__all__ = [
    "EPISODE_TEMPLATE",
    "PageRenderer",
    "RenderedPage",
    "compile_template",
    "select_episodes",
]

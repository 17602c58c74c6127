"""Page template for rendered episodes."""

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from podsite.utils.errors import RenderError

EPISODE_TEMPLATE = """---
layout: {{ layout }}
title: "{{ episode.title }}"
date: {{ episode.date }}
people:
{%- for person in people %}
  - {{ person }}
{%- endfor %}
audio: {{ episode.audio }}
guid: {{ episode.guid }}
image: {{ image }}
description: {{ episode.description }}
draft: false
---

{{ episode.content }}"""


def compile_template(source: str = EPISODE_TEMPLATE) -> Template:
    """Compile a page template.

    Output is front matter plus markdown, so autoescaping is off.

    Raises:
        RenderError: If the template has a syntax error
    """
    env = Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    try:
        return env.from_string(source)
    except TemplateError as e:
        raise RenderError(f"Invalid page template: {e}") from e

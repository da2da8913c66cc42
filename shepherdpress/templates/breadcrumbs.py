"""Breadcrumb trail built from a page's ancestry."""

from typing import List

from ..models.post import Ancestor
from ..utils.html import esc_url


def render_breadcrumb(ancestors: List[Ancestor]) -> str:
    """Breadcrumb nav, root first.

    Args:
        ancestors: Ancestors as the content source returns them, immediate
            parent first

    Returns:
        Breadcrumb markup, or an empty string for a top-level page
    """
    if not ancestors:
        return ""

    items = "".join(
        f'\t\t\t\t<li><a href="{esc_url(ancestor.link)}">{ancestor.title}</a></li>\n'
        for ancestor in reversed(ancestors)
    )
    return (
        '\t\t<nav aria-label="Breadcrumb Menu" role="navigation" class="is-hidden">\n'
        '\t\t\t<ul class="breadcrumbs">\n'
        f"{items}"
        "\t\t\t</ul>\n"
        "\t\t</nav>\n"
    )

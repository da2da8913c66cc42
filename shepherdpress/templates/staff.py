"""Staff list-item template."""

from typing import List

from ..models.staff import StaffRecord


def render_staff_item(record: StaffRecord) -> str:
    """One staff member as a list item.

    Field values are inserted verbatim. The photo is left out when the
    record has no image.
    """
    image = ""
    if record.image and record.image.url:
        image = f'\t<img src="{record.image.url}" alt="{record.image.alt}" class="thumbnail">\n'

    return (
        "<li>\n"
        f"{image}"
        '\t<div class="seremon-detail">\n'
        f"\t\t<h3>{record.full_name}</h3>\n"
        f"\t\t<h4>{record.position}</h4>\n"
        f"\t\t<p>{record.write_up}</p>\n"
        "\t</div>\n"
        "</li>\n"
    )


def render_staff_list(records: List[StaffRecord]) -> str:
    return (
        '<section class="title-header">\n'
        "\t<header>\n"
        '\t\t<h1 class="entry-title">Staff</h1>\n'
        "\t</header>\n"
        "</section>\n"
        '<ul class="staff-list">\n'
        f"{''.join(render_staff_item(record) for record in records)}"
        "</ul>\n"
    )

"""Footer: contact details, social links and the document close."""

from .. import hooks
from ..utils.html import esc_url
from .context import ThemeContext
from .layout import MobileMenuLayout


def _icon_link(href: str, icon: str, label: str) -> str:
    return (
        '\t\t\t\t\t\t\t<div class="columns small-4">\n'
        f'\t\t\t\t\t\t\t\t<a href="{href}" aria-label="{label}"><i class="fa {icon}" aria-hidden="true"></i></a>\n'
        "\t\t\t\t\t\t\t</div>\n"
    )


def render_footer(ctx: ThemeContext) -> str:
    """Everything after the page content, down to ``</html>``.

    Stored footer values are inserted verbatim.
    """
    settings = ctx.settings
    layout = MobileMenuLayout.from_settings(ctx.settings)
    assets = esc_url(ctx.site.assets_url)

    return (
        '\t\t<div id="footer-container">\n'
        '\t\t\t<footer id="footer">\n'
        '\t\t\t\t<div class="row">\n'
        '\t\t\t\t\t<div class="columns large-4 medium-4 small-12 text-center">\n'
        '\t\t\t\t\t\t<div class="row">\n'
        f"{_icon_link(settings.get('footer_text_cal_link'), 'fa-calendar-o', 'Calendar')}"
        f"{_icon_link(settings.get('footer_text_map_link'), 'fa-map', 'Map')}"
        '\t\t\t\t\t\t\t<div class="columns small-4">\n'
        f'\t\t\t\t\t\t\t\t<a href="{settings.get("footer_text_dio_link")}" aria-label="Diocese">'
        f'<img src="{assets}/assets/images/Episcopal-logo.png" alt="" /></a>\n'
        "\t\t\t\t\t\t\t</div>\n"
        "\t\t\t\t\t\t</div>\n"
        "\t\t\t\t\t</div>\n"
        '\t\t\t\t\t<div class="columns large-4 medium-4 small-12 text-center">\n'
        "\t\t\t\t\t</div>\n"
        '\t\t\t\t\t<div class="columns large-4 medium-4 small-12 text-center">\n'
        '\t\t\t\t\t\t<div class="row">\n'
        f"{_icon_link(settings.get('footer_text_facebook_link'), 'fa-facebook-square', 'Facebook')}"
        f"{_icon_link(settings.get('footer_text_twitter_link'), 'fa-twitter', 'Twitter')}"
        f"{_icon_link(settings.get('footer_text_email_link'), 'fa-envelope', 'Email sign up')}"
        "\t\t\t\t\t\t</div>\n"
        "\t\t\t\t\t</div>\n"
        "\t\t\t\t</div>\n"
        '\t\t\t\t<div class="row sub-footer">\n'
        '\t\t\t\t\t<div class="columns large-4 medium-4 small-12 text-center">\n'
        f"\t\t\t\t\t\t{settings.get('footer_text_address')}\n"
        "\t\t\t\t\t\t<br/>\n"
        f"\t\t\t\t\t\t{settings.get('footer_text_telephone')}\n"
        "\t\t\t\t\t</div>\n"
        '\t\t\t\t\t<div class="columns large-4 medium-4 small-12 text-center">\n'
        f"\t\t\t\t\t\t{settings.get('footer_text_1')}\n"
        "\t\t\t\t\t</div>\n"
        '\t\t\t\t\t<div class="columns large-4 medium-4 small-12 text-center">\n'
        f"\t\t\t\t\t\t{settings.get('footer_text_disclosure')}\n"
        "\t\t\t\t\t</div>\n"
        "\t\t\t\t</div>\n"
        "\t\t\t</footer>\n"
        "\t\t</div>\n"
        f"{ctx.hooks.do_action(hooks.LAYOUT_END, ctx=ctx)}"
        f"{layout.wrapper_close()}"
        f"{ctx.hooks.do_action(hooks.FOOTER_SCRIPTS, ctx=ctx)}"
        f"{ctx.hooks.do_action(hooks.BEFORE_CLOSING_BODY, ctx=ctx)}"
        "\t</body>\n"
        "</html>\n"
    )

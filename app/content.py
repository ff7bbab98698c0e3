"""
Page Content

Loads pages and navigation links and decides which template renders a page.
"""

from flask import render_template
from app import logger
from models import Page, Link

INDEX_TEMPLATE = 'index.html'
PAGE_TEMPLATE = 'page.html'
SLIDESHOW_TEMPLATE = 'slideshow.html'
VIDEO_TEMPLATE = 'video.html'


def load_page(page_type, page_tag):
    """Get the page with the given type and tag, or None."""
    page = Page.query.filter_by(type=page_type, tag=page_tag).order_by(Page.id).first()

    if page is None:
        logger.warning(f"No page found for {page_type}/{page_tag}")

    return page


def load_index_link():
    """Get the link pointing at the index page."""
    link = Link.query.filter_by(type='index').order_by(Link.id).first()

    if link is None:
        logger.warning("No index link found")

    return link


def load_links(link_type):
    """Get all links of one type in insertion order."""
    return Link.query.filter_by(type=link_type).order_by(Link.id).all()


def build_template_data(page_type, page):
    """
    Collect everything the templates need for one page.

    Article links are only loaded for the index page, which lists them.

    Returns:
        dict: template context
    """
    return {
        'page': page,
        'index_link': load_index_link(),
        'main_links': load_links('main'),
        'footer_links': load_links('footer'),
        'article_links': load_links('article') if page_type == 'index' else []
    }


def select_template(page_type, page):
    """
    Pick the content template for a page.

    Pages with several images get the slideshow, pages with a video the
    video template. Otherwise the index page uses its own template and
    every other page the plain one.
    """
    if page is not None and len(page.images or []) > 1:
        return SLIDESHOW_TEMPLATE
    if page is not None and page.video:
        return VIDEO_TEMPLATE
    if page_type == 'index':
        return INDEX_TEMPLATE
    return PAGE_TEMPLATE


def render_page(template_name, data):
    """Render a content template; every content template extends base.html."""
    return render_template(template_name, **data)

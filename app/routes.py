"""
Portfolio Site Routes

This service provides:
1. HTML pages for the index, main, footer and article sections
2. The extracted archive assets under /temporary/
3. A read-only JSON API over pages and links
"""

from flask import abort, jsonify, request, send_from_directory
from jinja2 import TemplateError
from app import app, logger
from app.content import load_page, load_links, build_template_data, select_template, render_page
from models import Link, PAGE_TYPES


@app.route('/health')
def health():
    """Health check endpoint."""
    return jsonify({'status': 'ok', 'service': app.config['SERVICE_NAME']}), 200


def show_page(page_type, page_tag):
    """Load, assemble and render one page."""
    page = load_page(page_type, page_tag)
    if page is None:
        abort(404)

    data = build_template_data(page_type, page)
    template_name = select_template(page_type, page)

    logger.info(f"Rendering page: {page.title}")

    try:
        return render_page(template_name, data)
    except TemplateError:
        logger.exception(f"Could not render {template_name} for {page_type}/{page_tag}")
        abort(500)


@app.route('/', defaults={'path': ''})
@app.route('/<path:path>')
def index(path):
    """Index page; also answers every path no other route claims."""
    return show_page('index', app.config['INDEX_TAG'])


def make_page_view(page_type):
    """Build the view serving /<page_type>/<tag>."""
    def view(page_tag=''):
        return show_page(page_type, page_tag)

    view.__name__ = f'{page_type}_page'
    view.__doc__ = f"Render a {page_type} page by its tag."
    return view


for _page_type in ('main', 'footer', 'article'):
    _view = make_page_view(_page_type)
    app.add_url_rule(f'/{_page_type}/', view_func=_view)
    app.add_url_rule(f'/{_page_type}/<path:page_tag>', view_func=_view)


@app.route('/temporary/<path:filename>')
def temporary_file(filename):
    """Serve a file extracted from the content archive."""
    return send_from_directory(app.config['TEMPORARY_DIR'], filename)


# ===== JSON API =====

@app.route('/api/pages/<page_type>/<path:page_tag>', methods=['GET'])
def get_page(page_type, page_tag):
    """Retrieve a single page by type and tag."""
    if page_type not in PAGE_TYPES:
        return jsonify({'error': f'Unknown page type: {page_type}'}), 400

    page = load_page(page_type, page_tag)

    if not page:
        return jsonify({'error': 'Page not found'}), 404

    return jsonify(page.to_dict()), 200


@app.route('/api/links', methods=['GET'])
def list_links():
    """
    List navigation links.

    Query params:
    - type: only links of this page type
    """
    link_type = request.args.get('type')

    if link_type:
        if link_type not in PAGE_TYPES:
            return jsonify({'error': f'Unknown page type: {link_type}'}), 400
        links = load_links(link_type)
    else:
        links = Link.query.order_by(Link.id).all()

    return jsonify({
        'total': len(links),
        'links': [link.to_dict() for link in links]
    }), 200


# ===== ERROR HANDLERS =====

def wants_json():
    return request.path.startswith('/api/')


@app.errorhandler(404)
def not_found(error):
    if wants_json():
        return jsonify({'error': 'Not found'}), 404

    data = build_template_data('error', None)
    return render_page('404.html', data), 404


@app.errorhandler(500)
def server_error(error):
    if wants_json():
        return jsonify({'error': 'Internal server error'}), 500

    return render_page('500.html', {}), 500

"""
Portfolio Site Database Models

Content is seeded once from the bundled archive and read on every request.

Key Principles:
- A page is addressed by its (type, tag) pair
- Every page has exactly one navigation link derived from it
- Page content is trusted HTML from the archive
"""

from extensions import db
from sqlalchemy import Index

PAGE_TYPES = ('index', 'main', 'footer', 'article')


class Page(db.Model):
    """A renderable page, as imported from data/pages.json."""
    __tablename__ = 'pages'

    id = db.Column(db.Integer, primary_key=True)

    # Addressing
    type = db.Column(db.String(20), nullable=False)  # 'index', 'main', 'footer', 'article'
    tag = db.Column(db.String(150), nullable=False)  # slug derived from the title

    # Text
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    content = db.Column(db.Text)  # HTML, rendered unescaped

    # Page-specific assets, relative to the extracted archive
    custom_css = db.Column(db.String(255))
    custom_js = db.Column(db.String(255))

    # Media
    images = db.Column(db.JSON, nullable=False, default=list)
    video = db.Column(db.String(255))

    __table_args__ = (
        Index('idx_page_type_tag', 'type', 'tag'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'tag': self.tag,
            'title': self.title,
            'description': self.description,
            'content': self.content,
            'custom_css': self.custom_css,
            'custom_js': self.custom_js,
            'images': list(self.images or []),
            'video': self.video
        }


class Link(db.Model):
    """
    Navigation entry pointing at a page.
    Article links carry the first page image as their cover.
    """
    __tablename__ = 'links'

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(20), nullable=False, index=True)
    tag = db.Column(db.String(150), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    url = db.Column(db.String(255), nullable=False)
    cover_image = db.Column(db.String(255))  # articles only

    @classmethod
    def for_page(cls, page):
        """Derive the navigation link for a page."""
        link = cls(type=page.type, title=page.title, tag=page.tag)

        if page.type == 'article' and page.images:
            link.cover_image = page.images[0]

        if page.type == 'index':
            link.url = '/'
        else:
            link.url = f'/{page.type}/{page.tag}'

        return link

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'tag': self.tag,
            'title': self.title,
            'url': self.url,
            'cover_image': self.cover_image
        }

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import NotFoundError, PersistenceError
from .models import Post


class PostStore:
    """Create, list and look up posts.

    The store is built once in create_app() and handed to the request
    handlers. Every call runs against the Flask-SQLAlchemy session of the
    current app context; soft-deleted posts are never returned.
    """

    def __init__(self, db):
        self.db = db

    def migrate(self):
        # Create the post table if it does not exist yet
        try:
            self.db.create_all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Database migration failed: {e}") from e

    def ping(self):
        try:
            self.db.session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise PersistenceError(f"Database unavailable: {e}") from e

    def create(self, title, content):
        # Creates new Post object, adds it to the session and commits.
        # The id and timestamps are filled in by the database on flush.
        post = Post(title=title, content=content)
        try:
            self.db.session.add(post)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise PersistenceError(f"Could not create post: {e}") from e
        return post

    def list_all(self):
        try:
            return self._live().order_by(Post.id).all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise PersistenceError(f"Could not list posts: {e}") from e

    def get_by_id(self, post_id):
        try:
            post = self._live().filter(Post.id == post_id).first()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise PersistenceError(f"Could not load post {post_id}: {e}") from e
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def count(self):
        try:
            return self._live().count()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise PersistenceError(f"Could not count posts: {e}") from e

    def _live(self):
        return Post.query.filter(Post.deleted_at.is_(None))

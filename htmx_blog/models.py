from flask_sqlalchemy import SQLAlchemy # database operations
from datetime import datetime # date and time handling

# Create SQLAlchemy instance, bound to the app in create_app()
db = SQLAlchemy()

# Define Data Model (Data Layer Interface)
# Each post has an ID, title, content and the timestamps the store maintains.
# A post with deleted_at set is soft-deleted and never returned by the store.
class Post(db.Model):
    # AUTOINCREMENT keeps SQLite from handing out an id twice
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)
    deleted_at = db.Column(db.DateTime, nullable=True, index=True)

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def __repr__(self):
        return f"<Post {self.id} {self.title!r}>"

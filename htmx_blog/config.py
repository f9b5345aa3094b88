# Access environment variables
import os


class Config:
    # Configure database with fallback
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///blog.db')
    # Avoids a warning
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Listener address, fixed port
    HOST = '0.0.0.0'
    PORT = 8080

    # Relative to the package, or an absolute path
    TEMPLATE_FOLDER = 'templates'

    # Event name sent in the HX-Trigger header after a post is created
    HX_TRIGGER_EVENT = 'postCreated'

from flask import current_app, jsonify, request


class BlogError(Exception):
    """Base class for errors that are turned into a JSON error response."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class BindingError(BlogError):
    """Request input could not be bound to the expected fields."""

    status_code = 400


class NotFoundError(BlogError):
    """No non-deleted post matches the requested id."""

    status_code = 404


class PersistenceError(BlogError):
    """The database rejected or failed a read or write."""

    status_code = 500


def register_error_handlers(app):
    # Every BlogError becomes {"error": message} with its own status code.
    # Database details only go to the log, the client gets a generic 500.
    @app.errorhandler(BlogError)
    def handle_blog_error(error):
        if isinstance(error, PersistenceError):
            current_app.logger.error(f"✗ Database error: {error.message}")
            return jsonify({"error": "Internal server error"}), error.status_code
        current_app.logger.warning(f"✗ {request.method} {request.path}: {error.message}")
        return jsonify({"error": error.message}), error.status_code

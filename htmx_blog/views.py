import re

from flask import Blueprint, current_app, jsonify, make_response, request

from .errors import BindingError, PersistenceError

POST_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Range of an SQLite INTEGER
MIN_POST_ID = -2 ** 63
MAX_POST_ID = 2 ** 63 - 1


def is_htmx_request():
    # htmx sends HX-Request: true on every request it issues
    return request.headers.get("HX-Request") == "true"


def bind_post_fields():
    """Read title and content from a JSON body or from form fields."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise BindingError("Request body must be a JSON object")
    else:
        data = request.form

    fields = {}
    for name in ("title", "content"):
        value = data.get(name)
        if value is None:
            raise BindingError(f"Field '{name}' is required")
        if not isinstance(value, str):
            raise BindingError(f"Field '{name}' must be a string")
        fields[name] = value
    return fields["title"], fields["content"]


def parse_post_id(raw):
    """Parse a path segment as a signed 64-bit id."""
    # ASCII digits only, int() alone would take "0_1", " 1" or Arabic-Indic digits
    if not POST_ID_PATTERN.fullmatch(raw):
        raise BindingError("Invalid post ID")
    post_id = int(raw)
    if not MIN_POST_ID <= post_id <= MAX_POST_ID:
        raise BindingError("Invalid post ID")
    return post_id


def create_blueprint(store, renderer):
    bp = Blueprint("posts", __name__)

    def render_index():
        # query database to retrieve all live posts
        posts = store.list_all()
        current_app.logger.info(f"✓ Retrieved {len(posts)} posts")
        # htmx swaps in just the list, a normal browser request gets the full page
        view = "partials/post_list.html" if is_htmx_request() else "index.html"
        return renderer.render(view, posts=posts)

    # Displays all posts (READ operation)
    @bp.route("/", methods=["GET"])
    def index():
        return render_index()

    # Creates a post and answers with the refreshed list in the same response
    @bp.route("/create", methods=["POST"])
    def create():
        title, content = bind_post_fields()

        store.create(title, content)
        current_app.logger.info(f"✓ Created post: {title}")

        response = make_response(render_index())
        response.headers["HX-Trigger"] = current_app.config["HX_TRIGGER_EVENT"]
        return response

    # Displays a single post
    @bp.route("/post/<post_id>", methods=["GET"])
    def post(post_id):
        post = store.get_by_id(parse_post_id(post_id))
        view = "partials/post_detail.html" if is_htmx_request() else "post.html"
        return renderer.render(view, post=post)

    @bp.route("/health", methods=["GET"])
    def health():
        try:
            store.ping()
        except PersistenceError as e:
            current_app.logger.error(f"✗ Health check failed: {e.message}")
            return jsonify({"status": "unhealthy", "database": "unavailable"}), 503
        return jsonify({"status": "healthy", "database": "connected"}), 200

    return bp

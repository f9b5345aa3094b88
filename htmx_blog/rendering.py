import os

from flask import render_template
from jinja2 import TemplateNotFound

# Views the request handlers render; startup fails if any of them is missing
REQUIRED_VIEWS = (
    "index.html",
    "post.html",
    "partials/post_list.html",
    "partials/post_detail.html",
)


class ViewRegistry:
    """Templates compiled once at startup, looked up by file name.

    load() walks the app's template folder and compiles every ``.html`` file
    through the app's Jinja environment, so a malformed template raises
    ``TemplateSyntaxError`` and a missing required view raises
    ``TemplateNotFound`` before the server starts listening.
    """

    def __init__(self, app):
        self.app = app
        self.views = {}

    @property
    def folder(self):
        return os.path.join(self.app.root_path, self.app.template_folder)

    def load(self):
        views = {}
        for dirpath, _dirnames, filenames in os.walk(self.folder):
            for filename in filenames:
                if not filename.endswith(".html"):
                    continue
                path = os.path.join(dirpath, filename)
                # Jinja template names always use forward slashes
                name = os.path.relpath(path, self.folder).replace(os.sep, "/")
                views[name] = self.app.jinja_env.get_template(name)

        for name in REQUIRED_VIEWS:
            if name not in views:
                raise TemplateNotFound(name)

        self.views = views
        self.app.logger.info(f"✓ Loaded {len(views)} templates from {self.folder}")
        return self

    def names(self):
        return sorted(self.views)

    def render(self, name, **context):
        try:
            template = self.views[name]
        except KeyError:
            raise TemplateNotFound(name) from None
        return render_template(template, **context)

"""Demo HTTP API with ping, login, register and course routes."""

import argparse

from flask import Blueprint, Flask, g, jsonify, request

_ACCESS_TOKEN = "token"
_TOKEN_HEADER = "access_toke"
_TOKEN_FAILED = "token 检查失败"


def _message(text):
    return jsonify(message=text)


def _token_check():
    if request.headers.get(_TOKEN_HEADER) != _ACCESS_TOKEN:
        return jsonify(message=_TOKEN_FAILED), 500
    g.user_name = "nick"
    g.user_id = "10001"
    return None


def _auth_check():
    user_id = g.get("user_id")
    user_name = g.get("user_name")
    print(f"AuthCheck: user_id={user_id},user_name={user_name}")


def _api_blueprint():
    api = Blueprint("api_v1", __name__, url_prefix="/api/v1")

    @api.get("/ping")
    def ping():
        return _message("pong")

    @api.post("/login")
    def login():
        return _message("login")

    @api.post("/register")
    def register():
        return _message("Register")

    return api


def _course_blueprints():
    v1 = Blueprint("course_v1", __name__, url_prefix="/v1")
    v1.before_request(_token_check)
    v1.before_request(_auth_check)

    @v1.post("/course")
    def create_course():
        return _message("create course")

    @v1.get("/course")
    def get_course():
        return "", 200

    @v1.put("/course")
    def edit_course():
        return "", 200

    @v1.delete("/course")
    def delete_course():
        return "", 200

    # Only the endpoints that changed are served under /v2.
    v2 = Blueprint("course_v2", __name__, url_prefix="/v2")
    v2.before_request(_auth_check)

    @v2.post("/course")
    def create_course_v2():
        return _message("V2 create course")

    return v1, v2


def _not_found(_error):
    return "404 page not found", 404, {"Content-Type": "text/plain"}


def create_app():
    """Build the application with all routes and middleware registered."""
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.register_blueprint(_api_blueprint())
    for blueprint in _course_blueprints():
        app.register_blueprint(blueprint)
    app.register_error_handler(404, _not_found)
    app.register_error_handler(405, _not_found)
    return app


def main(argv=None):
    """Serve the demo API, by default on every interface at port 8080."""
    parser = argparse.ArgumentParser(description="Run the demo web API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
"""
Flask-based Movie Graph search page and JSON path API.
"""

from flask import Flask, current_app, jsonify, render_template_string, request

from moviegraph import config
from moviegraph.data.loader import load_default_graph
from moviegraph.exceptions import MovieGraphError
from moviegraph.graph import Graph, NodeKind, PathFinder

# HTML Templates
BASE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Movie Graph</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; min-height: 100vh; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; }
        .header h1 { font-size: 1.5rem; }
        .container { max-width: 1000px; margin: 0 auto; padding: 20px; }
        .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); padding: 30px; margin-bottom: 20px; }
        h2 { margin-bottom: 20px; color: #1a1a2e; }
        input[type="text"], select { width: 100%; padding: 12px 15px; border: 2px solid #ddd; border-radius: 8px; font-size: 16px; margin-bottom: 15px; }
        button { background: #4ecdc4; color: white; border: none; padding: 12px 30px; border-radius: 8px; font-size: 16px; cursor: pointer; }
        button:hover { background: #45b7aa; }
        .form-row { display: flex; gap: 20px; margin-bottom: 20px; }
        .form-row > div { flex: 1; }
        .form-row label { display: block; margin-bottom: 8px; font-weight: 600; color: #333; }
        .path-display { background: #ecf0f1; padding: 20px; border-radius: 8px; margin: 20px 0; }
        .path-display .actor { color: #155724; font-weight: 600; }
        .path-display .movie { color: #856404; font-style: italic; }
        .error { color: #e74c3c; }
    </style>
</head>
<body>
    <div class="header"><h1>Movie Graph</h1></div>
    <div class="container">
        <div class="card">
            <h2>Find a Connection</h2>
            <form method="GET" action="/search">
                <div class="form-row">
                    <div>
                        <label>Start</label>
                        <input type="text" name="start" value="{{ start }}" placeholder="Actor or movie">
                        <select name="start_kind">
                            <option value="actor" {{ 'selected' if start_kind == 'actor' }}>Actor</option>
                            <option value="movie" {{ 'selected' if start_kind == 'movie' }}>Movie</option>
                        </select>
                    </div>
                    <div>
                        <label>Target</label>
                        <input type="text" name="target" value="{{ target }}" placeholder="Actor or movie">
                        <select name="target_kind">
                            <option value="actor" {{ 'selected' if target_kind == 'actor' }}>Actor</option>
                            <option value="movie" {{ 'selected' if target_kind == 'movie' }}>Movie</option>
                        </select>
                    </div>
                </div>
                <button type="submit">Search</button>
            </form>
        </div>
        {% if searched %}
        <div class="card">
            {% if error %}
                <p class="error">{{ error }}</p>
            {% elif path %}
                <h2>{{ degrees }} degrees of separation</h2>
                <div class="path-display">
                    {% for node in path %}
                        <span class="{{ node.kind }}">{{ node.name }}</span>{% if not loop.last %} &rarr; {% endif %}
                    {% endfor %}
                </div>
            {% else %}
                <p>No connection between {{ start }} and {{ target }}.</p>
            {% endif %}
        </div>
        {% endif %}
    </div>
</body>
</html>
"""


class SearchError(Exception):
    """Invalid search request; carries the HTTP status to report."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def create_app(graph: Graph | None = None) -> Flask:
    """
    Create the web app.

    Args:
        graph: Graph to search (default: the configured shared graph,
            loaded on first request)
    """
    app = Flask(__name__)
    app.config["GRAPH"] = graph
    app.config["PATH_FINDER"] = PathFinder(max_depth=config.BFS_MAX_DEPTH)

    @app.route("/")
    def index():
        return render_template_string(
            BASE_TEMPLATE, start="", target="", start_kind="actor", target_kind="actor", searched=False
        )

    @app.route("/search")
    def search():
        params = _read_params()
        error, status = None, 200
        try:
            result = _run_search(**params)
        except SearchError as e:
            result = {"path": [], "degrees": None}
            error, status = e.message, e.status
        return render_template_string(
            BASE_TEMPLATE,
            searched=True,
            error=error,
            path=result["path"],
            degrees=result["degrees"],
            **params,
        ), status

    @app.route("/api/path")
    def api_path():
        try:
            return jsonify(_run_search(**_read_params()))
        except SearchError as e:
            return jsonify({"error": e.message}), e.status

    return app


def _read_params() -> dict[str, str]:
    return {
        "start": request.args.get("start", "").strip(),
        "target": request.args.get("target", "").strip(),
        "start_kind": request.args.get("start_kind", NodeKind.ACTOR.value),
        "target_kind": request.args.get("target_kind", NodeKind.ACTOR.value),
    }


def _get_graph() -> Graph:
    """Graph configured on the app, falling back to the shared default graph."""
    graph = current_app.config["GRAPH"]
    if graph is None:
        graph = load_default_graph()
        current_app.config["GRAPH"] = graph
    return graph


def _run_search(start: str, target: str, start_kind: str, target_kind: str) -> dict:
    """Resolve both names and search. Raises SearchError for bad requests."""
    if not start or not target:
        raise SearchError("Both 'start' and 'target' are required", 400)

    try:
        graph = _get_graph()
        start_node = _lookup(graph, start, start_kind)
        target_node = _lookup(graph, target, target_kind)
    except (MovieGraphError, OSError) as e:
        raise SearchError(f"Graph unavailable: {e}", 503) from e

    finder: PathFinder = current_app.config["PATH_FINDER"]
    path = finder.find_shortest_path(start_node, target_node)

    return {
        "start": start,
        "target": target,
        "found": path is not None,
        "path": [
            {"name": node.get_name(), "kind": getattr(node, "kind", NodeKind.ACTOR).value}
            for node in path or []
        ],
        "degrees": (len(path) - 1) // 2 if path is not None else None,
    }


def _lookup(graph: Graph, name: str, kind: str):
    try:
        node_kind = NodeKind(kind)
    except ValueError:
        raise SearchError(f"Unknown kind '{kind}' (expected 'actor' or 'movie')", 400) from None

    node = graph.get_movie(name) if node_kind is NodeKind.MOVIE else graph.get_actor(name)
    if node is None:
        raise SearchError(f"No {node_kind.value} named '{name}'", 404)
    return node


if __name__ == "__main__":
    print("\n=== Movie Graph ===")
    print(f"Open http://{config.WEB_HOST}:{config.WEB_PORT} in your browser\n")
    create_app().run(debug=True, host=config.WEB_HOST, port=config.WEB_PORT)

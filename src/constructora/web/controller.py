from __future__ import annotations

from pathlib import Path

from flask import Flask, abort, jsonify, request, send_from_directory

from ..container import Container

API_PREFIXES = ("api/", "functions/")
CATCH_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def register(app: Flask, container: Container) -> None:
    dist_dir = Path(app.config["DIST_DIR"])

    @app.route("/", defaults={"path": ""}, endpoint="spa_index", methods=CATCH_ALL_METHODS)
    @app.route("/<path:path>", endpoint="spa", methods=CATCH_ALL_METHODS)
    def spa(path: str):
        """Static bundle with index.html fallback for client-side routes."""
        if path.startswith(API_PREFIXES):
            return jsonify({"error": "Not found"}), 404
        if request.method not in ("GET", "HEAD"):
            abort(405)
        if path and (dist_dir / path).is_file():
            return send_from_directory(dist_dir, path)
        if (dist_dir / f"{path}.html").is_file():
            return send_from_directory(dist_dir, f"{path}.html")
        if (dist_dir / "index.html").is_file():
            return send_from_directory(dist_dir, "index.html")
        abort(404)

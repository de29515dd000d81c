"""Flask application factory for the disk sorting web API.

The ``create_app`` function returns a Flask app with three endpoints:

- ``GET /api/algorithms`` — list the registered algorithm names.
- ``POST /api/sort`` — sort the alternating row and return JSON.
- ``GET /api/compare`` — compare every algorithm on one row size.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, request

from alternating_disks.algorithms import ALGORITHMS
from alternating_disks.comparison import compare, run_algorithm
from alternating_disks.logging import Logger, LogLevel

_HTTP_BAD_REQUEST = 400
_HTTP_NOT_FOUND = 404

# Each request sorts 2n disks in O(n^2) swaps; keep the work bounded.
MAX_LIGHT_COUNT = 500


def _parse_light_count(raw: object) -> int | None:
    """Return *raw* as a light count in range, or None if it is not one."""
    # JSON floats and bools are not counts, even when int() would take them.
    if isinstance(raw, bool) or not isinstance(raw, int | str):
        return None
    try:
        count = int(raw)
    except ValueError:
        return None
    if not 0 < count <= MAX_LIGHT_COUNT:
        return None
    return count


def _bad_light_count() -> tuple[Response, int]:
    msg = f"'light_count' must be an integer between 1 and {MAX_LIGHT_COUNT}"
    return jsonify({"error": msg}), _HTTP_BAD_REQUEST


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)

    @app.route("/api/algorithms")
    def algorithms() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the names of every registered algorithm."""
        return jsonify({"algorithms": list(ALGORITHMS)})

    @app.route("/api/sort", methods=["POST"])
    def sort() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Sort the alternating row and return the result.

        Expects JSON body: ``{"light_count": 3, "algorithm": "lawnmower"}``

        Returns:
            JSON with ``algorithm``, ``before``, ``after``, ``swap_count``,
            ``expected``, ``sorted`` and ``log`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "light_count" not in data or "algorithm" not in data:
            return jsonify(
                {"error": "Missing 'light_count' or 'algorithm' field"}
            ), _HTTP_BAD_REQUEST

        light_count = _parse_light_count(data["light_count"])
        if light_count is None:
            return _bad_light_count()

        name = str(data["algorithm"])
        if name not in ALGORITHMS:
            return jsonify({"error": f"Unknown algorithm {name!r}"}), _HTTP_NOT_FOUND

        logger = Logger()
        run = run_algorithm(name, light_count, logger=logger)
        return jsonify(
            {
                "algorithm": run.algorithm,
                "before": run.before,
                "after": run.after,
                "swap_count": run.swap_count,
                "expected": run.expected,
                "sorted": run.is_sorted,
                "log": [str(e) for e in logger.filter(min_level=LogLevel.INFO)],
            }
        )

    @app.route("/api/compare")
    def compare_all() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run every algorithm on ``?light_count=n`` and return the runs."""
        light_count = _parse_light_count(request.args.get("light_count"))
        if light_count is None:
            return _bad_light_count()
        return jsonify({"runs": [run.to_dict() for run in compare(light_count)]})

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``alternating-disks-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)

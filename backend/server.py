import os
import sys
import threading
import time

# Ensure backend/ is on sys.path so sibling imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv

from catalog import Catalog
from data_loader import load_data, resolve_data_path
from normalizer import normalize_code

load_dotenv()

app = Flask(__name__)

API_VERSION = "1.0.0"

# ── Paths ─────────────────────────────────────────────────────────────────────
DATA_PATH = resolve_data_path(os.environ.get("DATA_PATH"))
_data_lock = threading.Lock()
_data_mtime = None


def _env_float(name: str, default: float, minimum: float = 0.0) -> float:
    raw = os.environ.get(name, "")
    try:
        return max(minimum, float(raw))
    except (TypeError, ValueError):
        return default


_SLOW_REQUEST_LOG_MS = _env_float("SLOW_REQUEST_LOG_MS", 750.0, minimum=0.0)


def _data_file_mtime(path: str):
    try:
        return os.path.getmtime(path)
    except OSError:
        return None


# ── Startup data load ──────────────────────────────────────────────────────────
# A missing or broken file is not fatal: routes answer 503 until a reload works.
_catalog: Catalog | None = None
try:
    _catalog = load_data(DATA_PATH)
    _data_mtime = _data_file_mtime(DATA_PATH)
    print(f"[OK] Loaded {_catalog.store.size()} courses from {DATA_PATH}")
except FileNotFoundError:
    print(f"[WARN] Data file not found: {DATA_PATH}; no courses loaded.", file=sys.stderr)
except Exception as exc:
    print(f"[WARN] Failed to load data: {exc}", file=sys.stderr)


def _reload_data_if_changed(force: bool = False) -> bool:
    """
    Hot-reload the catalog when DATA_PATH changes on disk.

    The new catalog is built off to the side and swapped in only when the load
    succeeds; a failed reload keeps serving the previous one.
    Returns True when a reload occurred, else False.
    """
    global _catalog, _data_mtime

    candidate_mtime = _data_file_mtime(DATA_PATH)
    if not force:
        if candidate_mtime is None:
            return False
        if _data_mtime is not None and candidate_mtime <= _data_mtime:
            return False

    with _data_lock:
        latest_mtime = _data_file_mtime(DATA_PATH)
        if not force:
            if latest_mtime is None:
                return False
            if _data_mtime is not None and latest_mtime <= _data_mtime:
                return False

        try:
            new_catalog = load_data(DATA_PATH)
        except Exception as exc:
            print(f"[WARN] Data reload failed; keeping previous catalog: {exc}", file=sys.stderr)
            return False

        _catalog = new_catalog
        _data_mtime = latest_mtime if latest_mtime is not None else candidate_mtime
        print(f"[OK] Reloaded {new_catalog.store.size()} courses from {DATA_PATH}")
        return True


def _refresh_data_if_needed() -> None:
    try:
        _reload_data_if_changed()
    except Exception as exc:
        print(f"[WARN] Data reload check failed: {exc}", file=sys.stderr)


def _data_not_loaded():
    return jsonify({"error": "Data not loaded"}), 503


# -- Security headers ------------------------------------------------------
@app.before_request
def _start_request_timer():
    g._request_start_time = time.perf_counter()


@app.after_request
def _add_security_headers(response):
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "same-origin"

    started = getattr(g, "_request_start_time", None)
    if started is not None:
        duration_ms = (time.perf_counter() - started) * 1000.0
        if duration_ms >= _SLOW_REQUEST_LOG_MS:
            endpoint = request.endpoint or "unknown"
            print(
                f"[SLOW] {request.method} {request.path} "
                f"endpoint={endpoint} status={response.status_code} duration_ms={duration_ms:.1f}"
            )
    return response


# ── Error handler ──────────────────────────────────────────────────────────────
@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return jsonify({"error": e.description}), e.code
    print(f"[WARN] Unhandled error on {request.path}: {e!r}", file=sys.stderr)
    return jsonify({
        "error": "An unexpected server error occurred.",
    }), 500


# ── Routes ─────────────────────────────────────────────────────────────────────
@app.route("/health", methods=["GET"])
def health_endpoint():
    catalog = _catalog
    return jsonify({
        "status": "ok",
        "version": API_VERSION,
        "courses_loaded": catalog.store.size() if catalog else 0,
    })


@app.route("/api/courses", methods=["GET"])
def get_courses():
    """All courses in course-number order."""
    _refresh_data_if_needed()
    catalog = _catalog
    if catalog is None:
        return _data_not_loaded()
    return jsonify({"courses": [c.to_dict() for c in catalog.sorted_all()]})


@app.route("/api/courses/<course_number>", methods=["GET"])
def get_course(course_number):
    _refresh_data_if_needed()
    catalog = _catalog
    if catalog is None:
        return _data_not_loaded()

    code = normalize_code(course_number)
    found = catalog.lookup(code) if code else None
    if found is None:
        return jsonify({"error": f"Course {course_number} not found."}), 404
    return jsonify({"course": found.to_dict()})


@app.route("/api/courses/<course_number>/prerequisites", methods=["GET"])
def get_course_prerequisites(course_number):
    _refresh_data_if_needed()
    catalog = _catalog
    if catalog is None:
        return _data_not_loaded()

    code = normalize_code(course_number) or ""
    return jsonify({
        "course_number": code,
        "found": catalog.lookup(code) is not None,
        "prerequisites": catalog.prerequisites_of(code),
    })


@app.route("/api/courses/<course_number>/unlocks", methods=["GET"])
def get_course_unlocks(course_number):
    """Courses that become available once `course_number` is completed."""
    _refresh_data_if_needed()
    catalog = _catalog
    if catalog is None:
        return _data_not_loaded()

    code = normalize_code(course_number) or ""
    available = catalog.available_after(code)
    # Dangling codes have no record to show, only their key.
    records = [catalog.lookup(key) for key in available]
    return jsonify({
        "course_number": code,
        "found": catalog.lookup(code) is not None,
        "available": available,
        "courses": [c.to_dict() for c in records if c is not None],
    })


@app.route("/api/reload", methods=["POST"])
def reload_endpoint():
    reloaded = _reload_data_if_changed(force=True)
    catalog = _catalog
    return jsonify({
        "reloaded": reloaded,
        "courses_loaded": catalog.store.size() if catalog else 0,
    })


app.add_url_rule("/api/health", endpoint="api_health", view_func=health_endpoint, methods=["GET"])


# -- API catch-all (404 for unknown /api/* routes) -------------------
@app.route("/api/<path:rest>", methods=["GET", "POST", "PUT", "DELETE", "PATCH"])
def api_catch_all(rest):
    return jsonify({"error": f"/api/{rest} not found"}), 404


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(host="0.0.0.0", port=port, debug=debug)

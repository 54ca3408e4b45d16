from functools import wraps
from flask import jsonify, redirect, url_for
from leaguehub.auth.gate import current_auth


def admin_page_required(fn):
    """Render an admin page only for the admin role; everyone else goes home."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_auth().is_admin:
            return redirect(url_for("public.index"))
        return fn(*args, **kwargs)

    return wrapper


def admin_required(fn):
    """Restrict a JSON endpoint to the admin role."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        auth = current_auth()

        if not auth.is_signed_in:
            return jsonify({"error": "Authentication required"}), 401

        if not auth.is_admin:
            return jsonify({"error": "Admin access required"}), 403

        return fn(*args, **kwargs)

    return wrapper

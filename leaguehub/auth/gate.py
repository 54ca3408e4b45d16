"""Request-level access gate.

Runs before every intercepted request, resolves the session and the signed-in
identity once, and stores the result on ``g.auth``. Page guards, API guards and
templates all read that same ``AuthContext``.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional

from flask import current_app, g, jsonify, redirect, request, url_for
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy.exc import SQLAlchemyError

from leaguehub.errors import AuthError
from leaguehub.extensions import db
from leaguehub.models.user import User

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
ASSET_PATH = re.compile(r".+\.[\w]+$")


@dataclass(frozen=True)
class AuthContext:
    user_id: Optional[int] = None
    email: Optional[str] = None
    role: Optional[str] = None
    identity_error: bool = False
    csrf_token: Optional[str] = None

    @property
    def is_signed_in(self):
        return self.user_id is not None

    @property
    def is_admin(self):
        return self.is_signed_in and not self.identity_error and self.role == ADMIN_ROLE


ANONYMOUS = AuthContext()


def current_auth():
    return g.get("auth") or ANONYMOUS


def is_intercepted(path):
    """Static assets and file-like paths skip the gate; API paths never do."""
    if path.startswith("/api/"):
        return True
    if path.startswith("/static/"):
        return False
    return not ASSET_PATH.match(path)


def is_public(path):
    return any(re.fullmatch(pattern, path) for pattern in current_app.config["PUBLIC_ROUTES"])


def is_admin_path(path):
    prefix = current_app.config["ADMIN_PREFIX"]
    return path == prefix or path.startswith(prefix + "/")


def resolve_session():
    """Return ``(user_id, csrf_token)`` for a valid session, else ``(None, None)``."""
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as e:
        logger.info("Rejected session on %s: %s", request.path, e)
        return None, None

    identity = get_jwt_identity()
    if identity is None:
        return None, None
    return int(identity), get_jwt().get("csrf")


def fetch_identity(user_id):
    try:
        user = db.session.get(User, user_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        raise AuthError(f"Identity lookup failed for user {user_id}") from e

    if user is None:
        raise AuthError(f"User {user_id} not found")
    if not user.is_active:
        raise AuthError(f"User {user_id} is deactivated")
    return user


def build_auth_context():
    user_id, csrf_token = resolve_session()
    if user_id is None:
        return ANONYMOUS

    try:
        user = fetch_identity(user_id)
    except AuthError as e:
        logger.warning("Error fetching user: %s", e)
        return AuthContext(user_id=user_id, identity_error=True, csrf_token=csrf_token)

    return AuthContext(
        user_id=user.id,
        email=user.email,
        role=user.role,
        csrf_token=csrf_token,
    )


def gate_request():
    g.auth = ANONYMOUS
    path = request.path
    if request.method == "OPTIONS" or not is_intercepted(path):
        return None

    g.auth = auth = build_auth_context()
    if is_public(path):
        return None

    if not auth.is_signed_in:
        if path.startswith("/api/"):
            return jsonify({"error": "Authentication required"}), 401
        return redirect(url_for("auth.sign_in", next=path))

    if is_admin_path(path) and not auth.is_admin:
        # Identity failures are indistinguishable from a non-admin here
        logger.info("Access denied to %s for user %s", path, auth.user_id)
        return redirect(url_for("public.index"))

    return None


def init_gate(app):
    app.before_request(gate_request)

    @app.context_processor
    def inject_auth():
        return {"auth": current_auth()}

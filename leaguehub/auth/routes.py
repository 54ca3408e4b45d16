import re
from flask import Blueprint, flash, jsonify, redirect, render_template, request, url_for
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
)
from marshmallow import ValidationError
from leaguehub.extensions import db, limiter
from leaguehub.models.user import User
from leaguehub.schemas.user import SignUpSchema, UserSchema

auth_bp = Blueprint("auth", __name__)
api_auth_bp = Blueprint("api_auth", __name__)
user_schema = UserSchema()
sign_up_schema = SignUpSchema()

PASSWORD_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&#]).{8,}$"
)


def validate_password(password):
    """Require 8+ chars with uppercase, lowercase, digit, and special char."""
    if not PASSWORD_RE.match(password):
        return (
            "Password must be at least 8 characters with uppercase, "
            "lowercase, digit, and special character"
        )
    return None


def authenticate(email, password):
    """Return ``(user, error, status)`` for a credential pair."""
    if not email or not password:
        return None, "Email and password are required", 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return None, "Invalid email or password", 401

    if not user.is_active:
        return None, "Account is deactivated", 403

    return user, None, 200


def _safe_next(target):
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("public.index")


def _signed_in_response(user, target):
    response = redirect(_safe_next(target))
    set_access_cookies(response, create_access_token(identity=str(user.id)))
    return response


# ─── Pages ───────────────────────────────────────────────────────────────────


@auth_bp.route("/sign-in", methods=["GET", "POST"])
@limiter.limit("10 per minute", methods=["POST"])
def sign_in():
    next_url = request.values.get("next", "")
    if request.method == "GET":
        return render_template("sign_in.html", next_url=next_url)

    user, error, status = authenticate(
        request.form.get("email", "").strip(), request.form.get("password", "")
    )
    if error:
        flash(error, "error")
        return render_template("sign_in.html", next_url=next_url), status

    return _signed_in_response(user, next_url)


@auth_bp.route("/sign-up", methods=["GET", "POST"])
@limiter.limit("5 per minute", methods=["POST"])
def sign_up():
    if request.method == "GET":
        return render_template("sign_up.html")

    try:
        data = sign_up_schema.load(request.form.to_dict())
    except ValidationError as e:
        for field, messages in e.messages.items():
            flash(f"{field}: {' '.join(messages)}", "error")
        return render_template("sign_up.html"), 400

    if User.query.filter_by(email=data["email"]).first():
        flash("Email already registered", "error")
        return render_template("sign_up.html"), 409

    pw_error = validate_password(data["password"])
    if pw_error:
        flash(pw_error, "error")
        return render_template("sign_up.html"), 400

    user = User(
        email=data["email"],
        first_name=data["first_name"],
        last_name=data["last_name"],
        public_metadata={},
    )
    user.set_password(data["password"])

    db.session.add(user)
    db.session.commit()

    return _signed_in_response(user, None)


@auth_bp.route("/sign-out", methods=["POST"])
def sign_out():
    response = redirect(url_for("public.index"))
    unset_jwt_cookies(response)
    return response


# ─── JSON API ────────────────────────────────────────────────────────────────


@api_auth_bp.route("/login", methods=["POST"])
@limiter.limit("10 per minute")
def login():
    data = request.get_json(silent=True) or {}

    user, error, status = authenticate(data.get("email"), data.get("password"))
    if error:
        return jsonify({"error": error}), status

    access_token = create_access_token(identity=str(user.id))
    refresh_token = create_refresh_token(identity=str(user.id))

    return jsonify(
        {
            "access_token": access_token,
            "refresh_token": refresh_token,
            "user": user_schema.dump(user),
        }
    ), 200


@api_auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
@limiter.limit("30 per minute")
def refresh():
    user_id = int(get_jwt_identity())
    user = db.session.get(User, user_id)

    if not user or not user.is_active:
        return jsonify({"error": "Account is deactivated"}), 403

    access_token = create_access_token(identity=str(user_id))
    return jsonify({"access_token": access_token}), 200


@api_auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    user_id = int(get_jwt_identity())
    user = db.session.get(User, user_id)

    if not user:
        return jsonify({"error": "User not found"}), 404

    return jsonify({"user": user_schema.dump(user)}), 200

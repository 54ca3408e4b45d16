from flask import Blueprint, abort, jsonify, request

from leaguehub.auth.decorators import admin_required
from leaguehub.errors import RecordNotFound
from leaguehub.services.admin_shell import TABS, build_shell

admin_api_bp = Blueprint("admin_api", __name__)


def _resource_or_404(resource):
    if resource not in TABS:
        abort(404)
    return resource


def _failure(view_model):
    status = 404 if isinstance(view_model.last_error, RecordNotFound) else 502
    return jsonify({"error": str(view_model.last_error)}), status


def _body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Request body is required")
    return data


# ─── Overview ────────────────────────────────────────────────────────────────


@admin_api_bp.route("", methods=["GET"])
@admin_required
def overview():
    shell = build_shell()
    shell.load_all()
    for tab in TABS:
        if shell.view_models[tab].last_error:
            return _failure(shell.view_models[tab])
    return jsonify({tab: shell.view_models[tab].items for tab in TABS}), 200


# ─── Records ─────────────────────────────────────────────────────────────────


@admin_api_bp.route("/<resource>", methods=["GET"])
@admin_required
def list_records(resource):
    shell = build_shell()
    if not shell.activate(_resource_or_404(resource)):
        return _failure(shell.active)

    return jsonify({resource: shell.search(request.args.get("q", ""))}), 200


@admin_api_bp.route("/<resource>", methods=["POST"])
@admin_required
def create_record(resource):
    shell = build_shell()
    view_model = shell.view_models[_resource_or_404(resource)]
    if not view_model.create(_body()):
        return _failure(view_model)

    return jsonify({"record": view_model.last_record}), 201


@admin_api_bp.route("/<resource>/<int:record_id>", methods=["PATCH"])
@admin_required
def update_record(resource, record_id):
    shell = build_shell()
    view_model = shell.view_models[_resource_or_404(resource)]
    if not view_model.patch(record_id, _body()):
        return _failure(view_model)

    return jsonify({"record": view_model.last_record}), 200


@admin_api_bp.route("/<resource>/<int:record_id>", methods=["DELETE"])
@admin_required
def delete_record(resource, record_id):
    shell = build_shell()
    view_model = shell.view_models[_resource_or_404(resource)]
    if not view_model.remove(record_id):
        return _failure(view_model)

    return jsonify({"message": f"{view_model.resource.label.capitalize()} deleted"}), 200

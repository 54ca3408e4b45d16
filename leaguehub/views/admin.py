from flask import Blueprint, abort, flash, redirect, render_template, request, url_for
from marshmallow import ValidationError

from leaguehub.auth.decorators import admin_page_required
from leaguehub.services.admin_shell import TABS, build_shell

admin_bp = Blueprint("admin", __name__)


def _alert(message):
    flash(message, "error")


def _flash_validation(error):
    for field, messages in error.messages.items():
        if isinstance(messages, dict):
            messages = [str(m) for m in messages.values()]
        flash(f"{field}: {' '.join(messages)}", "error")


def _dispatch(tab, intent, *args):
    if tab not in TABS:
        abort(404)

    shell = build_shell(alert=_alert)
    try:
        ok = shell.dispatch(intent, *args, tab=tab)
    except ValidationError as e:
        _flash_validation(e)
        ok = False

    if ok:
        label = shell.view_models[tab].resource.label.capitalize()
        verb = {"add": "added", "edit": "updated", "delete": "deleted"}[intent]
        flash(f"{label} {verb}", "success")

    return redirect(url_for("admin.dashboard", tab=tab, q=request.args.get("q") or None))


@admin_bp.route("", methods=["GET"])
@admin_page_required
def dashboard():
    shell = build_shell(alert=_alert)
    shell.activate(request.args.get("tab", TABS[0]))

    # The league dialog needs the city and sport choices
    options = {}
    if shell.active_tab == "leagues":
        for tab in ("cities", "sports"):
            view_model = shell.view_models[tab]
            view_model.refresh()
            options[tab] = view_model.items

    items = shell.search(request.args.get("q", ""))
    return render_template(
        "admin.html",
        shell=shell,
        tabs=TABS,
        items=items,
        options=options,
        load_error=shell.load_error,
    )


@admin_bp.route("/<tab>", methods=["POST"])
@admin_page_required
def add_record(tab):
    return _dispatch(tab, "add", request.form.to_dict())


@admin_bp.route("/<tab>/<int:record_id>", methods=["POST"])
@admin_page_required
def edit_record(tab, record_id):
    return _dispatch(tab, "edit", record_id, request.form.to_dict())


@admin_bp.route("/<tab>/<int:record_id>/delete", methods=["POST"])
@admin_page_required
def delete_record(tab, record_id):
    return _dispatch(tab, "delete", record_id)

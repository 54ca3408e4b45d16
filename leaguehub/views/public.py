import logging

from flask import Blueprint, render_template, request

from leaguehub.errors import RemoteError
from leaguehub.gateway import DataGateway
from leaguehub.models.league import LeagueStatus
from leaguehub.services.listing import leagues_by_status

logger = logging.getLogger(__name__)

public_bp = Blueprint("public", __name__)

LISTING_TABS = [status.value for status in LeagueStatus]


@public_bp.route("/", methods=["GET"])
def index():
    city = request.args.get("city", "")
    tab = request.args.get("tab", LISTING_TABS[0])
    if tab not in LISTING_TABS:
        tab = LISTING_TABS[0]

    groups, load_error = None, None
    try:
        groups = leagues_by_status(DataGateway(), city=city)
    except RemoteError as e:
        logger.error("Error fetching leagues: %s", e)
        load_error = "Leagues could not be loaded right now."

    return render_template(
        "index.html",
        groups=groups,
        load_error=load_error,
        tabs=LISTING_TABS,
        active_tab=tab,
        city=city,
    )

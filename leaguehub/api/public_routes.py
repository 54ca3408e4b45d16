from flask import Blueprint, jsonify, request

from leaguehub.gateway import DataGateway
from leaguehub.services.listing import list_leagues

public_api_bp = Blueprint("public_api", __name__)


@public_api_bp.route("/leagues", methods=["GET"])
def get_leagues():
    leagues = list_leagues(
        DataGateway(),
        status=request.args.get("status"),
        city=request.args.get("city"),
    )
    return jsonify({"leagues": leagues}), 200

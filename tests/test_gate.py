from flask_jwt_extended import create_access_token

from leaguehub.auth.gate import AuthContext, is_intercepted
from leaguehub.extensions import db


def test_signed_out_admin_request_redirects_to_sign_in(client):
    resp = client.get("/admin")
    assert resp.status_code == 302
    assert resp.headers["Location"].startswith("/sign-in")
    assert "next=%2Fadmin" in resp.headers["Location"]


def test_non_admin_is_sent_home(client, member_headers):
    resp = client.get("/admin", headers=member_headers)
    assert resp.status_code == 302
    assert resp.headers["Location"] == "/"


def test_admin_gets_dashboard(client, admin_headers):
    resp = client.get("/admin", headers=admin_headers)
    assert resp.status_code == 200
    assert b"Admin Dashboard" in resp.data


def test_nested_admin_paths_are_gated(client, member_headers):
    resp = client.post("/admin/cities", headers=member_headers, data={"name": "Austin"})
    assert resp.status_code == 302
    assert resp.headers["Location"] == "/"


def test_missing_identity_is_treated_as_unauthorized(app, client, admin_user):
    token = create_access_token(identity=str(admin_user.id))
    db.session.delete(admin_user)
    db.session.commit()

    resp = client.get("/admin", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 302
    assert resp.headers["Location"] == "/"


def test_deactivated_admin_is_sent_home(client, admin_user, admin_headers):
    admin_user.is_active = False
    db.session.commit()

    resp = client.get("/admin", headers=admin_headers)
    assert resp.status_code == 302
    assert resp.headers["Location"] == "/"


def test_invalid_token_counts_as_signed_out(client):
    resp = client.get("/admin", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 302
    assert resp.headers["Location"].startswith("/sign-in")


def test_public_routes_pass_through(client):
    assert client.get("/").status_code == 200
    assert client.get("/sign-in").status_code == 200
    assert client.get("/sign-up").status_code == 200
    assert client.get("/health").status_code == 200


def test_assets_are_not_intercepted(client):
    resp = client.get("/favicon.ico")
    assert resp.status_code == 404


def test_api_without_session_gets_401(client):
    resp = client.get("/api/admin/cities")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Authentication required"


def test_api_non_admin_gets_403(client, member_headers):
    resp = client.get("/api/admin/cities", headers=member_headers)
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "Admin access required"


def test_is_intercepted():
    assert is_intercepted("/admin")
    assert is_intercepted("/api/public/leagues.json")
    assert not is_intercepted("/static/app.css")
    assert not is_intercepted("/logo.png")


def test_auth_context_roles():
    assert not AuthContext().is_signed_in
    assert not AuthContext().is_admin
    assert AuthContext(user_id=1, role="admin").is_admin
    assert not AuthContext(user_id=1, role="member").is_admin
    assert not AuthContext(user_id=1, role="admin", identity_error=True).is_admin


def test_nav_shows_admin_link_only_for_admins(client, admin_headers, member_headers):
    assert b'href="/admin"' in client.get("/", headers=admin_headers).data
    assert b'href="/admin"' not in client.get("/", headers=member_headers).data

from flask import Blueprint, jsonify

from .services import get_email_service

# 認証なしのhealth用Blueprint
health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.get("/live")
def health_live():
    """Simple liveness probe."""
    return jsonify({"status": "ok"}), 200


@health_bp.get("/ready")
def health_ready():
    """Readiness probe checking the configured email sender."""
    ok = True
    details = {}

    try:
        sender_ok = get_email_service().can_send_emails()
    except Exception:
        sender_ok = False

    if sender_ok:
        details["sender"] = "ok"
    else:
        ok = False
        details["sender"] = "error"

    status = 200 if ok else 503
    details["status"] = "ok" if ok else "error"
    return jsonify(details), status

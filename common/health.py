"""
common.health
~~~~~~~~~~~~~
GET /health/ – lightweight liveness + readiness probe.

Returns:
    200  {"status": "ok", "service": "villa-api", "db": "ok"}
    503  {"status": "degraded", "service": "villa-api", "db": "error: <msg>"}
"""
import structlog
from django.db import OperationalError, connection
from django.http import JsonResponse

logger = structlog.get_logger(__name__)

SERVICE_NAME = "villa-api"


def health_check(request):
    """Return service health including database connectivity status."""
    try:
        connection.ensure_connection()
    except OperationalError as exc:
        logger.error("health_check_db_failure", error=str(exc))
        return JsonResponse(
            {"status": "degraded", "service": SERVICE_NAME, "db": f"error: {exc}"},
            status=503,
        )

    return JsonResponse({"status": "ok", "service": SERVICE_NAME, "db": "ok"})

import logging

from django.db import connection
from django.http import JsonResponse

from hotels.models import Hotel

logger = logging.getLogger(__name__)


def healthz(request):
    """Report whether the database answers and the hotels table exists."""
    try:
        with connection.cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        tables = connection.introspection.table_names()
    except Exception as e:
        logger.exception("health check failed")
        return JsonResponse({'ok': False, 'error': str(e)}, status=500)
    db_ok = bool(row and row[0] == 1)
    table_ok = Hotel._meta.db_table in tables
    ok = db_ok and table_ok
    if not ok:
        logger.warning("health check degraded db=%s hotels_table=%s", db_ok, table_ok)
    return JsonResponse({'ok': ok, 'db': db_ok, 'hotels_table': table_ok}, status=200 if ok else 503)

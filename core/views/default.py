"""Default views for health checks."""

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from core.aggregators import AggregatorRegistry


@require_http_methods(["GET"])
def health_check(request):
    """
    Report service status and the registered aggregators.

    Returns:
        JsonResponse: {"status": "healthy", "aggregators": [...]}
    """
    return JsonResponse(
        {"status": "healthy", "aggregators": sorted(AggregatorRegistry.get_all())}
    )

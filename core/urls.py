"""
URL configuration for core app.
"""

from django.urls import path

from core import views
from core.feeds import AggregatedFeed

feed_view = AggregatedFeed()

urlpatterns = [
    path("health/", views.health_check, name="health_check"),
    path("<slug:aggregator_type>/", feed_view, name="feed"),
    path("<slug:aggregator_type>/<str:category>/", feed_view, name="feed_category"),
    path(
        "<slug:aggregator_type>/<str:category>/<str:subcategory>/",
        feed_view,
        name="feed_subcategory",
    ),
    path(
        "<slug:aggregator_type>/<str:category>/<str:subcategory>/<str:region>/",
        feed_view,
        name="feed_region",
    ),
]

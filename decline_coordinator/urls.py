"""
decline_coordinator URL Configuration.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""

from django.http import JsonResponse
from django.urls import include, re_path
from rest_framework import status

from decline_coordinator.apps.charges import urls as charges_urls
from decline_coordinator.apps.core import views as core_views

urlpatterns = [
    re_path(r'^health/?', core_views.health, name='health'),

    # Local Django Apps
    re_path(r'^charges/', include(charges_urls)),

    # Browser automated hits, this will limit 404s in logging
    re_path(r'^$', lambda r: JsonResponse(data=[
        "Welcome to Decline Coordinator",
        "This is an API app that explains Stripe decline codes.",
    ], status=status.HTTP_200_OK, safe=False), name='root'),
]

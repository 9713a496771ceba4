"""
charges app URLS
"""

from django.urls import path

from decline_coordinator.apps.charges.views import DeclineCodeDetailView, DeclineCodeListView

app_name = 'charges'
urlpatterns = [
    path('decline-codes/', DeclineCodeListView.as_view(), name='decline_code_list'),
    path('decline-codes/<str:decline_code>/', DeclineCodeDetailView.as_view(), name='decline_code_detail'),
]

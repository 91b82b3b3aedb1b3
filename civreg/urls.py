"""
Civil Registry Reports - URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from civreg.views import DashboardView

urlpatterns = [
    # Admin site
    path('admin/', admin.site.urls),

    # Dashboard (home)
    path('', DashboardView.as_view(), name='dashboard'),

    # Apps
    path('accounts/', include('civreg.accounts.urls')),
    path('reports/', include('civreg.reports.urls')),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# Customize admin site
admin.site.site_header = 'Civil Registry'
admin.site.site_title = 'Civil Registry Admin'
admin.site.index_title = 'Registry Administration'

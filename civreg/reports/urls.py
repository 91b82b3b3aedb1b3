from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    # Reports dashboard
    path('', views.ReportDashboardView.as_view(), name='dashboard'),

    # Export
    path('export/', views.ExportCSVView.as_view(), name='export_csv'),
    path('export/json/', views.ExportJSONView.as_view(), name='export_json'),

    # Custom reports
    path('custom/', views.CustomReportView.as_view(), name='custom'),
]

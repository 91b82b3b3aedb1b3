"""
Civil Registry Reports - landing views
"""

import logging

from django.conf import settings
from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import TemplateView

from civreg.accounts.scope import ReportScope
from civreg.reports.generator import ReportGenerator

logger = logging.getLogger('civreg')


class DashboardView(LoginRequiredMixin, TemplateView):
    """
    Landing page after login.

    Every role lands here; division officers also get their quick stats
    and a link into the reports dashboard.
    """

    template_name = 'dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        scope = ReportScope.from_user(self.request.user)

        context['scope'] = scope
        context['can_view_reports'] = scope.role == settings.REPORT_DIVISION_ROLE
        context['quick_stats'] = None

        if context['can_view_reports']:
            try:
                context['quick_stats'] = ReportGenerator().quick_stats(scope.office_code)
            except Exception as e:
                logger.exception(f"Dashboard quick stats failed for {scope.username}: {e}")

        return context

import csv
import logging

from django.conf import settings
from django.contrib import messages
from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views.generic import TemplateView, View

from civreg.accounts.views import DivisionRoleRequiredMixin
from .dispatch import REPORT_QUERIES, ReportResult, dispatch, report_payload, table_rows
from .forms import CustomReportForm, PeriodForm
from .generator import ReportGenerator
from .kinds import REPORT_CHART_TYPES, REPORT_ICONS, ReportKind
from .params import ReportRequest, current_quarter

logger = logging.getLogger('civreg.reports')

CSV_HEADER = ['Category', 'Count', 'Percentage', 'Trend']


def csv_row(category, entry):
    percentage = entry.get('percentage')
    trend = entry.get('trend')
    return [
        category,
        entry['count'],
        f"{percentage}%" if percentage is not None else '',
        f"{trend}%" if trend is not None else '',
    ]


class ReportDashboardView(DivisionRoleRequiredMixin, TemplateView):
    """
    GN division reports dashboard.

    One report kind is rendered per request: its statistics table, its
    chart and, for the overview, the quick-stat cards. Query failures are
    logged and shown as a banner over an otherwise empty page.
    """

    template_name = 'reports/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        report_request = ReportRequest.from_query(self.request.GET)

        context.update({
            'scope': self.scope,
            'report_request': report_request,
            'report_title': report_request.title,
            'chart_type': REPORT_CHART_TYPES[report_request.kind],
            'report_tabs': [
                {
                    'key': kind.value,
                    'label': kind.label,
                    'icon': REPORT_ICONS[kind],
                    'active': report_request.report_type == kind.value,
                }
                for kind in ReportKind
            ],
            'period_form': PeriodForm(report_request=report_request),
            'custom_form': CustomReportForm(),
            'export_url': f"{reverse('reports:export_csv')}?{report_request.querystring}",
            'json_export_url': f"{reverse('reports:export_json')}?{report_request.querystring}",
            'success': self.request.GET.get('success'),
            'now': timezone.now(),
            'result': ReportResult(),
            'quick_stats': None,
            'recent_activities': [],
            'error': None,
        })

        try:
            generator = ReportGenerator()
            gn_id = self.scope.office_code
            context['result'] = dispatch(generator, gn_id, report_request)
            context['recent_activities'] = generator.recent_activities(
                gn_id, settings.REPORT_RECENT_ACTIVITY_LIMIT
            )
            context['quick_stats'] = generator.quick_stats(gn_id)
        except Exception as e:
            logger.exception(f"Reports dashboard failed for {self.scope.username}: {e}")
            context['result'] = ReportResult()
            context['recent_activities'] = []
            context['quick_stats'] = None
            context['error'] = f"System Error: {e}"

        context['is_overview'] = report_request.kind == ReportKind.OVERVIEW
        return context


class ExportCSVView(DivisionRoleRequiredMixin, View):
    """Export the selected report's statistics table as CSV."""

    def get(self, request):
        report_request = ReportRequest.from_query(request.GET)

        try:
            result = dispatch(ReportGenerator(), self.scope.office_code, report_request)
        except Exception as e:
            logger.exception(f"CSV export failed for {self.scope.username}: {e}")
            messages.error(request, f"System Error: {e}")
            return redirect(f"{reverse('reports:dashboard')}?{report_request.querystring}")

        filename = f"report-{report_request.kind.value}-{timezone.localdate():%Y-%m-%d}.csv"
        response = HttpResponse(
            content_type='text/csv',
            headers={'Content-Disposition': f'attachment; filename="{filename}"'},
        )

        writer = csv.writer(response)
        writer.writerow(['Report', report_request.title])
        writer.writerow(['GN Division', self.scope.office_name or self.scope.office_code])
        writer.writerow(['Period', report_request.period_label])
        writer.writerow([])
        writer.writerow(CSV_HEADER)
        for category, entry in result.rows:
            writer.writerow(csv_row(category, entry))

        logger.info(f"{self.scope.username} exported {filename}")
        return response


class ExportJSONView(DivisionRoleRequiredMixin, View):
    """Export the selected report's raw statistics as JSON."""

    def get(self, request):
        report_request = ReportRequest.from_query(request.GET)

        try:
            payload = report_payload(ReportGenerator(), self.scope.office_code, report_request)
        except Exception as e:
            logger.exception(f"JSON export failed for {self.scope.username}: {e}")
            return JsonResponse({'error': f"System Error: {e}"}, status=500)

        logger.info(f"{self.scope.username} exported {report_request.kind.value} report as JSON")
        return JsonResponse(payload)


class CustomReportView(DivisionRoleRequiredMixin, View):
    """Custom report over a date range for the selected categories."""

    template_name = 'reports/custom_report.html'

    def get(self, request):
        form = CustomReportForm(request.GET)
        if not form.is_valid():
            for errors in form.errors.values():
                for error in errors:
                    messages.error(request, error)
            return redirect('reports:dashboard')

        start = form.cleaned_data['start_date']
        end = form.cleaned_data['end_date']
        gn_id = self.scope.office_code

        try:
            generator = ReportGenerator()
            sections = self._sections(generator, gn_id, form.cleaned_data['categories'], end)
            registrations = generator.registrations_between(
                gn_id, start, end, compare=form.compares_periods
            )
            families, citizens = generator.registered_in_range(gn_id, start, end)
            families, citizens = list(families), list(citizens)
        except Exception as e:
            logger.exception(f"Custom report failed for {self.scope.username}: {e}")
            messages.error(request, f"System Error: {e}")
            return redirect('reports:dashboard')

        report_type = dict(CustomReportForm.REPORT_TYPE_CHOICES)[form.cleaned_data['custom_report_type']]

        if form.cleaned_data['format'] == 'csv':
            return self._csv_response(report_type, start, end, registrations, sections)

        return render(request, self.template_name, {
            'scope': self.scope,
            'report_type': report_type,
            'start_date': start,
            'end_date': end,
            'registrations': table_rows(registrations),
            'sections': sections,
            'families': families,
            'citizens': citizens,
            'now': timezone.now(),
        })

    def _sections(self, generator, gn_id, categories, end):
        report_request = ReportRequest(
            report_type=ReportKind.OVERVIEW.value,
            year=end.year,
            month=end.month,
            quarter=current_quarter(end.month),
        )
        sections = []
        for category in categories:
            kind = ReportKind(category)
            stats = REPORT_QUERIES[kind].stats(generator, gn_id, report_request)
            sections.append((kind.label, table_rows(stats)))
        return sections

    def _csv_response(self, report_type, start, end, registrations, sections):
        filename = f"custom-report-{start:%Y-%m-%d}-{end:%Y-%m-%d}.csv"
        response = HttpResponse(
            content_type='text/csv',
            headers={'Content-Disposition': f'attachment; filename="{filename}"'},
        )

        writer = csv.writer(response)
        writer.writerow(['Report', report_type])
        writer.writerow(['GN Division', self.scope.office_name or self.scope.office_code])
        writer.writerow(['Period', f"{start:%Y-%m-%d} to {end:%Y-%m-%d}"])

        for title, rows in [('Registrations', table_rows(registrations))] + sections:
            writer.writerow([])
            writer.writerow([title])
            writer.writerow(CSV_HEADER)
            for category, entry in rows:
                writer.writerow(csv_row(category, entry))

        logger.info(f"{self.scope.username} exported {filename}")
        return response

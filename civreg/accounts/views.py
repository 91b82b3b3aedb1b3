import logging

from django.conf import settings
from django.contrib.auth import logout
from django.contrib.auth import views as auth_views
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import redirect
from django.views.generic import TemplateView

from .forms import LoginForm
from .scope import ReportScope

logger = logging.getLogger('civreg.accounts')


def client_ip(request):
    return request.META.get('HTTP_X_FORWARDED_FOR', '').split(',')[0].strip() or \
        request.META.get('REMOTE_ADDR')


class RoleRequiredMixin(LoginRequiredMixin):
    """
    Mixin that requires a signed-in user holding ``required_role``.

    Anonymous users are sent to the login page. Users with any other role
    are sent back to their own dashboard instead of seeing an error.
    """

    required_role = None
    role_mismatch_url = 'dashboard'

    def get_required_role(self):
        return self.required_role

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return self.handle_no_permission()
        if request.user.role != self.get_required_role():
            logger.info(
                f"Role '{request.user.role}' of {request.user.username} cannot open "
                f"{request.path}, redirecting to {self.role_mismatch_url}"
            )
            return redirect(self.role_mismatch_url)
        self.scope = ReportScope.from_user(request.user)
        return super().dispatch(request, *args, **kwargs)


class DivisionRoleRequiredMixin(RoleRequiredMixin):
    """Restrict a view to GN division officers."""

    def get_required_role(self):
        return settings.REPORT_DIVISION_ROLE


class LoginView(auth_views.LoginView):
    """
    Login view with "remember me" support and audit logging.
    Redirects to a safe ?next target, otherwise to LOGIN_REDIRECT_URL.
    """

    template_name = 'accounts/login.html'
    authentication_form = LoginForm
    redirect_authenticated_user = True

    def form_valid(self, form):
        """Handle successful login with remember me support."""
        response = super().form_valid(form)

        if self.request.POST.get('remember_me'):
            # Use configured SESSION_COOKIE_AGE, persists across browser close
            self.request.session.set_expiry(None)
        else:
            # Session expires when browser closes
            self.request.session.set_expiry(0)

        logger.info(f"User logged in: {self.request.user.username} from {client_ip(self.request)}")
        return response

    def form_invalid(self, form):
        """Log failed login attempt."""
        response = super().form_invalid(form)
        username = form.data.get('username', 'unknown')
        logger.warning(f"Failed login attempt for: {username} from {client_ip(self.request)}")
        return response


class LogoutView(TemplateView):
    """
    Logout with confirmation.

    - GET request: Shows logout confirmation page
    - POST request: Performs actual logout and redirects
    """

    template_name = 'accounts/logout_confirm.html'

    def get(self, request, *args, **kwargs):
        """Show logout confirmation page for GET requests."""
        if not request.user.is_authenticated:
            # Already logged out, redirect to login
            return redirect('accounts:login')
        return super().get(request, *args, **kwargs)

    def post(self, request, *args, **kwargs):
        """Perform logout on POST request."""
        if request.user.is_authenticated:
            logger.info(f"User logged out: {request.user.username} from {client_ip(request)}")

        # Clears the session
        logout(request)

        return redirect('accounts:logged_out')


class LoggedOutView(TemplateView):
    """Displayed after successful logout."""

    template_name = 'accounts/logged_out.html'

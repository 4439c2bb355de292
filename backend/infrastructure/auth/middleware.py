"""
Admin gate middleware.

Guards every path under ADMIN_GATE_PATH_PREFIX with the session cookie
issued by `POST /api/v1/auth/session/`.
"""

import logging

from django.conf import settings
from django.http import HttpResponseRedirect

from .tokens import TokenError, has_admin_claim, verify_session_token

logger = logging.getLogger(__name__)


class AdminGateMiddleware:
    """
    Redirects admin panel requests that lack a valid admin session:

    - no cookie: to LOGIN_URL
    - cookie that fails verification: to LOGIN_URL
    - valid cookie without the admin claim: to the site root

    Requests outside the prefix are passed through untouched.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith(settings.ADMIN_GATE_PATH_PREFIX):
            return self.get_response(request)

        raw = request.COOKIES.get(settings.ADMIN_GATE_COOKIE)
        if not raw:
            return HttpResponseRedirect(settings.LOGIN_URL)

        try:
            token = verify_session_token(raw)
        except TokenError as e:
            logger.warning(f"Rejected admin session cookie for {request.path}: {e}")
            return HttpResponseRedirect(settings.LOGIN_URL)

        if not has_admin_claim(token):
            return HttpResponseRedirect('/')

        request.admin_session = token
        return self.get_response(request)

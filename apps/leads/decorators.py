# Decorators in this file:
# 1. staff_required - Only dashboard staff can access
# ==============================================================================

from functools import wraps
from django.shortcuts import redirect
from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.http import JsonResponse


def staff_required(view_func):
    """
    Decorator: Only staff users can access this view

    Checks:
    1. User is authenticated (logged in)
    2. User is staff OR superuser
    """

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())

        if request.user.is_staff or request.user.is_superuser:
            return view_func(request, *args, **kwargs)

        messages.error(request, 'You do not have permission to access this page. Staff access required.')

        if request.headers.get('X-Requested-With') == 'XMLHttpRequest':
            return JsonResponse({
                'success': False,
                'error': 'Staff access required'
            }, status=403)

        return redirect('leads:lead_form')

    return wrapper

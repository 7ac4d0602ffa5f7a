import logging
import re

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import render, redirect
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from .client import LeadAPIClient
from .decorators import staff_required
from .forms import PublicLeadForm, IndividualLeadForm
from .tasks import track_utm_click
from .utils import extract_utm_params, should_track_click, utm_querystring

logger = logging.getLogger(__name__)

PUBLIC_SUBMIT_ERROR = 'Failed to submit form. Please try again.'
INTERNAL_SUBMIT_ERROR = 'Unable to create lead'

SHORT_CODE_RE = re.compile(r'^[A-Za-z0-9_-]+$')


def _queue_click_tracking(request):
    url = request.build_absolute_uri()
    try:
        track_utm_click.delay(url)
    except Exception as e:
        # Tracking is not critical; the form must still render
        logger.warning(f"Could not queue click tracking for {url}: {str(e)}")


@require_http_methods(['GET', 'POST'])
def lead_form_view(request):
    if request.method == 'POST':
        form = PublicLeadForm(request.POST)

        if form.is_valid():
            success, _, error = LeadAPIClient().submit_public_lead(form.to_payload())

            if success:
                logger.info(f"Public lead submitted for {form.cleaned_data['phone']}")
                utm_params = extract_utm_params(form.cleaned_data)
                query = utm_querystring(utm_params)
                url = reverse('leads:lead_form_success')
                return redirect(f'{url}?{query}' if query else url)

            # Keep the form populated so the user can retry
            form.add_error(None, error or PUBLIC_SUBMIT_ERROR)

        return render(request, 'leads/lead_form.html', {'form': form})

    utm_params = extract_utm_params(request.GET)
    if should_track_click(request.GET):
        _queue_click_tracking(request)

    initial = dict(utm_params)
    for name in ('state', 'district', 'mandal'):
        if request.GET.get(name):
            initial[name] = request.GET[name]

    form = PublicLeadForm(initial=initial)
    return render(request, 'leads/lead_form.html', {'form': form})


def lead_form_success_view(request):
    """Thank-you screen; sends the visitor back to an empty form after a short delay."""
    utm_params = extract_utm_params(request.GET)

    # redirect=true so returning to the form is not counted as a new click
    return_url = f"{reverse('leads:lead_form')}?{utm_querystring(utm_params, redirect='true')}"

    context = {
        'return_url': return_url,
        'redirect_seconds': settings.LEAD_FORM_SUCCESS_REDIRECT_SECONDS,
    }
    return render(request, 'leads/lead_form_success.html', context)


@login_required
@staff_required
@require_http_methods(['GET', 'POST'])
def individual_lead_view(request):
    client = LeadAPIClient()

    success, filter_options, _ = client.get_filter_options()
    if not success:
        filter_options = {}

    if request.method == 'POST':
        form = IndividualLeadForm(request.POST, filter_options=filter_options)

        if form.is_valid():
            success, response_data, error = client.create_lead(form.to_payload())

            if success:
                messages.success(request, 'Lead created successfully')

                response_data = response_data or {}
                nested = response_data.get('data')
                lead_id = (nested.get('_id') if isinstance(nested, dict) else None) or response_data.get('_id')
                dashboard_url = settings.LEADS_DASHBOARD_URL.rstrip('/')

                if lead_id and dashboard_url:
                    return redirect(f'{dashboard_url}/{lead_id}')
                return redirect('leads:individual_lead')

            messages.error(request, error or INTERNAL_SUBMIT_ERROR)

    else:
        form = IndividualLeadForm(filter_options=filter_options)

    return render(request, 'leads/individual_lead.html', {'form': form})


def short_link_redirect_view(request, short_code):
    """Hand a short code to the backend, which resolves it and logs the click."""
    short_code = short_code.strip()

    if not SHORT_CODE_RE.match(short_code):
        logger.warning(f"Invalid short code: {short_code!r}")
        return render(request, 'leads/short_link_error.html', {'error': 'Invalid short code'}, status=400)

    return redirect(LeadAPIClient().short_link_url(short_code))

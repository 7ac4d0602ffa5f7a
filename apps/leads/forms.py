from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Div, Field, Submit, HTML
from crispy_forms.bootstrap import FormActions

from apps.locations.forms import LocationChoiceField, LocationFieldsMixin
from .utils import UTM_PARAMS


REQUIRED_FIELDS_MESSAGE = 'Please fill in all required fields'

GENDER_CHOICES = [
    ('', 'Select Gender'),
    ('Male', 'Male'),
    ('Female', 'Female'),
    ('Other', 'Other'),
    ('Not Specified', 'Prefer not to say'),
]

DEFAULT_QUOTAS = ['Not Applicable', 'Management', 'Convenor']
DEFAULT_GENDERS = ['Not Specified', 'Male', 'Female', 'Other']
DEFAULT_APPLICATION_STATUSES = ['Not Provided', 'Submitted', 'Not Submitted']

# Form field name -> Lead API payload key
PAYLOAD_KEYS = {
    'hall_ticket_number': 'hallTicketNumber',
    'name': 'name',
    'phone': 'phone',
    'email': 'email',
    'father_name': 'fatherName',
    'father_phone': 'fatherPhone',
    'mother_name': 'motherName',
    'gender': 'gender',
    'course_interested': 'courseInterested',
    'inter_college': 'interCollege',
    'rank': 'rank',
    'village': 'village',
    'state': 'state',
    'district': 'district',
    'mandal': 'mandal',
    'quota': 'quota',
    'application_status': 'applicationStatus',
}


def text_input(placeholder='', **attrs):
    return forms.TextInput(attrs={'class': 'form-control', 'placeholder': placeholder, **attrs})


class PublicLeadForm(LocationFieldsMixin, forms.Form):
    """
    Lead form published on the website.

    Required: name, phone, father's name, father's phone, village, state,
    district and mandal. When any of them is missing the form reports one
    aggregate error instead of per-field messages.
    """

    REQUIRED_FIELDS = ['name', 'phone', 'father_name', 'father_phone', 'village', 'state', 'district', 'mandal']

    hall_ticket_number = forms.CharField(required=False, max_length=50, label='Hall Ticket Number', widget=text_input('Enter Hall Ticket Number'))
    name = forms.CharField(required=False, max_length=200, label='Name *', widget=text_input())
    phone = forms.CharField(required=False, max_length=20, label='Phone Number *', widget=text_input(type='tel'))
    email = forms.EmailField(required=False, label='Email (Optional)', widget=forms.EmailInput(attrs={'class': 'form-control'}))
    father_name = forms.CharField(required=False, max_length=200, label="Father's Name *", widget=text_input())
    father_phone = forms.CharField(required=False, max_length=20, label="Father's Phone Number *", widget=text_input(type='tel'))
    mother_name = forms.CharField(required=False, max_length=200, label="Mother's Name (Optional)", widget=text_input())
    gender = forms.ChoiceField(required=False, choices=GENDER_CHOICES, label='Gender', widget=forms.Select(attrs={'class': 'form-select'}))
    village = forms.CharField(required=False, max_length=200, label='Village *', widget=text_input())
    state = LocationChoiceField(required=False, label='State *')
    district = LocationChoiceField(required=False, label='District *')
    mandal = LocationChoiceField(required=False, label='Mandal/Tehsil *')
    is_nri = forms.BooleanField(required=False, label='Non-Resident Indian (NRI)', help_text='Check this if you are a Non-Resident Indian', widget=forms.CheckboxInput(attrs={'class': 'form-check-input'}))
    course_interested = forms.CharField(required=False, max_length=200, label='Course Interested (Optional)', widget=text_input())
    inter_college = forms.CharField(required=False, max_length=200, label='Inter College (Optional)', widget=text_input())
    rank = forms.IntegerField(required=False, min_value=0, label='Rank (Optional)', widget=forms.NumberInput(attrs={'class': 'form-control'}))

    # Campaign attribution captured from the landing URL
    utm_source = forms.CharField(required=False, widget=forms.HiddenInput())
    utm_medium = forms.CharField(required=False, widget=forms.HiddenInput())
    utm_campaign = forms.CharField(required=False, widget=forms.HiddenInput())
    utm_term = forms.CharField(required=False, widget=forms.HiddenInput())
    utm_content = forms.CharField(required=False, widget=forms.HiddenInput())

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.form_id = 'lead-form'
        self.helper.attrs = {'data-disable-on-submit': 'true'}

        self.helper.layout = Layout(
            Div(
                Div(Field('hall_ticket_number'), css_class='col-md-6'),
                Div(Field('name'), css_class='col-md-6'),
                Div(Field('phone'), css_class='col-md-6'),
                Div(Field('email'), css_class='col-md-6'),
                Div(Field('father_name'), css_class='col-md-6'),
                Div(Field('father_phone'), css_class='col-md-6'),
                Div(Field('mother_name'), css_class='col-md-6'),
                Div(Field('gender'), css_class='col-md-6'),
                Div(Field('village'), css_class='col-md-6'),
                Div(Field('state', data_location_field='state'), css_class='col-md-6'),
                Div(Field('district', data_location_field='district'), css_class='col-md-6'),
                Div(Field('mandal', data_location_field='mandal'), css_class='col-md-6'),
                Div(Field('is_nri'), css_class='col-12'),
                Div(Field('course_interested'), css_class='col-md-6'),
                Div(Field('inter_college'), css_class='col-md-6'),
                Div(Field('rank'), css_class='col-md-6'),
                css_class='row'
            ),
            *[Field(name) for name in UTM_PARAMS],
            FormActions(
                Submit('submit', 'Submit', css_class='btn btn-primary w-100')
            )
        )

    def clean(self):
        cleaned_data = super().clean()

        missing = [name for name in self.REQUIRED_FIELDS if not cleaned_data.get(name)]
        if missing:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, code='required')

        return cleaned_data

    def to_payload(self):
        """Lead API payload; optional blanks are left out."""
        data = self.cleaned_data
        payload = {}

        for name, key in PAYLOAD_KEYS.items():
            if name not in self.fields:
                continue
            value = data.get(name)
            if value is None or value == '':
                continue
            payload[key] = value

        payload.update(self.location_payload())
        payload['isNRI'] = bool(data.get('is_nri'))
        payload['quota'] = 'Not Applicable'
        payload['applicationStatus'] = 'Not Provided'
        payload['source'] = 'Public Form'

        for name in UTM_PARAMS:
            value = data.get(name)
            if value:
                # utm_source -> utmSource
                payload['utm' + name[len('utm_'):].capitalize()] = value

        return payload


class IndividualLeadForm(LocationFieldsMixin, forms.Form):
    """
    Internal form for capturing a single lead from the dashboard.

    Unlike the public form, every missing field gets its own error. The state
    is pre-selected with INTERNAL_LEAD_DEFAULT_STATE.
    """

    REQUIRED = {'required': 'Required'}
    OPTIONAL_PAYLOAD_FIELDS = ['hall_ticket_number', 'email', 'mother_name', 'course_interested', 'inter_college']

    name = forms.CharField(max_length=200, label='Student Name *', error_messages=REQUIRED, widget=text_input('Enter full name'))
    phone = forms.CharField(max_length=20, label='Primary Phone *', error_messages=REQUIRED, widget=text_input('10 digit mobile number'))
    email = forms.EmailField(required=False, label='Email', widget=forms.EmailInput(attrs={'class': 'form-control', 'placeholder': 'student@email.com'}))
    hall_ticket_number = forms.CharField(required=False, max_length=50, label='Hall Ticket Number', widget=text_input('Optional'))
    father_name = forms.CharField(max_length=200, label="Father's Name *", error_messages=REQUIRED, widget=text_input())
    father_phone = forms.CharField(max_length=20, label="Father's Phone *", error_messages=REQUIRED, widget=text_input())
    mother_name = forms.CharField(required=False, max_length=200, label="Mother's Name", widget=text_input())
    inter_college = forms.CharField(required=False, max_length=200, label='Intermediate / Diploma College', widget=text_input('Where did the student study last?'))
    village = forms.CharField(max_length=200, label='Village / City *', error_messages=REQUIRED, widget=text_input())
    state = LocationChoiceField(label='State *', error_messages=REQUIRED)
    district = LocationChoiceField(label='District *', error_messages=REQUIRED)
    mandal = LocationChoiceField(label='Mandal *', error_messages=REQUIRED)
    quota = forms.ChoiceField(label='Quota', widget=forms.Select(attrs={'class': 'form-select'}))
    course_interested = forms.CharField(required=False, max_length=200, label='Programme Interest', widget=text_input('Programme / Branch'))
    gender = forms.ChoiceField(label='Gender', widget=forms.Select(attrs={'class': 'form-select'}))
    application_status = forms.ChoiceField(label='Application Status', widget=forms.Select(attrs={'class': 'form-select'}))

    district_placeholder = 'Select district'
    mandal_placeholder = 'Select mandal'

    def __init__(self, *args, **kwargs):
        filter_options = kwargs.pop('filter_options', None) or {}

        initial = dict(kwargs.get('initial') or {})
        kwargs['initial'] = initial
        initial.setdefault('state', getattr(settings, 'INTERNAL_LEAD_DEFAULT_STATE', 'Andhra Pradesh'))
        initial.setdefault('quota', 'Not Applicable')
        initial.setdefault('gender', 'Not Specified')
        initial.setdefault('application_status', 'Not Provided')

        super().__init__(*args, **kwargs)

        self.fields['quota'].choices = self._choices(filter_options.get('quotas'), DEFAULT_QUOTAS)
        self.fields['gender'].choices = self._choices(filter_options.get('genders'), DEFAULT_GENDERS)
        self.fields['application_status'].choices = self._choices(filter_options.get('applicationStatuses'), DEFAULT_APPLICATION_STATUSES)

        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.form_id = 'individual-lead-form'
        self.helper.attrs = {'data-disable-on-submit': 'true'}

        self.helper.layout = Layout(
            Div(
                Div(Field('name'), css_class='col-md-6'),
                Div(Field('phone'), css_class='col-md-6'),
                Div(Field('email'), css_class='col-md-6'),
                Div(Field('hall_ticket_number'), css_class='col-md-6'),
                css_class='row'
            ),
            Div(
                Div(Field('father_name'), css_class='col-md-6'),
                Div(Field('father_phone'), css_class='col-md-6'),
                Div(Field('mother_name'), css_class='col-md-6'),
                Div(Field('inter_college'), css_class='col-md-6'),
                css_class='row'
            ),
            Div(
                Div(Field('village'), css_class='col-md-6'),
                Div(Field('state', data_location_field='state'), css_class='col-md-6'),
                Div(Field('district', data_location_field='district'), css_class='col-md-6'),
                Div(Field('mandal', data_location_field='mandal'), css_class='col-md-6'),
                Div(Field('quota'), css_class='col-md-6'),
                Div(Field('course_interested'), css_class='col-md-6'),
                Div(Field('gender'), css_class='col-md-6'),
                Div(Field('application_status'), css_class='col-md-6'),
                css_class='row'
            ),
            HTML('<p class="text-muted small">Fields marked with * are mandatory. Ensure contact numbers are reachable before saving.</p>'),
            FormActions(
                HTML('<a href="{{ request.path }}" class="btn btn-outline-secondary">Reset</a>'),
                Submit('submit', 'Create Lead', css_class='btn btn-primary')
            )
        )

    @staticmethod
    def _choices(values, defaults):
        values = values or defaults
        return [(value, value) for value in values]

    def _clean_phone_value(self, name):
        phone = self.cleaned_data.get(name, '').strip()
        if phone and len(phone) < 10:
            raise ValidationError('Enter a valid phone number')
        return phone

    def clean_phone(self):
        return self._clean_phone_value('phone')

    def clean_father_phone(self):
        return self._clean_phone_value('father_phone')

    def to_payload(self):
        data = self.cleaned_data
        payload = {}

        for name, key in PAYLOAD_KEYS.items():
            if name not in self.fields:
                continue
            value = data.get(name)
            if name in self.OPTIONAL_PAYLOAD_FIELDS and not value:
                continue
            payload[key] = value if value is not None else ''

        payload.update(self.location_payload())
        return payload

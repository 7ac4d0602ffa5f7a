from django import forms

from .registry import get_registry
from .selection import LOCATION_FIELDS, LocationSelection


class LocationChoiceField(forms.ChoiceField):
    """Select for one level of the hierarchy; choices are filled in by the form."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('choices', [])
        kwargs.setdefault('widget', forms.Select(attrs={'class': 'form-select'}))
        super().__init__(*args, **kwargs)


class LocationFieldsMixin:
    """
    Binds a LocationSelection to a form's state/district/mandal fields.

    The selection is rebuilt from the submitted (or initial) values on every
    form instance, which cascades away any district or mandal that does not
    belong to the chosen ancestors. Choices then come from the selection's
    option lists, and a select whose ancestor is unset is rendered disabled.

    Usage:
        class MyForm(LocationFieldsMixin, forms.Form):
            state = LocationChoiceField()
            district = LocationChoiceField()
            mandal = LocationChoiceField()

        form = MyForm(request.POST, registry=registry)
    """

    state_placeholder = 'Select State'
    district_placeholder = 'Select District'
    mandal_placeholder = 'Select Mandal/Tehsil'

    def __init__(self, *args, **kwargs):
        self.registry = kwargs.pop('registry', None) or get_registry()
        super().__init__(*args, **kwargs)

        self.location_selection = LocationSelection(self.registry, **self._raw_location_values())

        if self.is_bound:
            # Only the cascaded values survive into validation
            data = self.data.copy()
            for name, value in self.location_selection.as_dict().items():
                data[self.add_prefix(name)] = value or ''
            self.data = data
        else:
            # The caller's initial dict stays untouched
            self.initial = dict(self.initial)
            for name, value in self.location_selection.as_dict().items():
                self.initial[name] = value or ''

        self._set_location_choices()

    def _raw_location_values(self):
        values = {}
        for field in LOCATION_FIELDS:
            name = field.value
            if self.is_bound:
                values[name] = self.data.get(self.add_prefix(name))
            else:
                values[name] = self.initial.get(name, self.fields[name].initial)
        return values

    def _set_location_choices(self):
        selection = self.location_selection

        self.fields['state'].choices = [('', self.state_placeholder)] + [
            (name, name) for name in self.registry.list_states()
        ]

        district_field = self.fields['district']
        if selection.district_enabled:
            options = selection.district_options
            empty = self.district_placeholder if options else 'No districts found for this state'
            district_field.widget.attrs.pop('disabled', None)
        else:
            options = ()
            empty = 'Select State first'
            district_field.widget.attrs['disabled'] = True
        district_field.choices = [('', empty)] + [(name, name) for name in options]

        mandal_field = self.fields['mandal']
        if selection.mandal_enabled:
            options = selection.mandal_options
            empty = self.mandal_placeholder if options else 'No mandals/tehsils found for this district'
            mandal_field.widget.attrs.pop('disabled', None)
        else:
            options = ()
            empty = 'Select District first'
            mandal_field.widget.attrs['disabled'] = True
        mandal_field.choices = [('', empty)] + [(name, name) for name in options]

    def location_payload(self):
        return {
            'state': self.location_selection.state,
            'district': self.location_selection.district,
            'mandal': self.location_selection.mandal,
        }

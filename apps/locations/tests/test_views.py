"""
Location API Tests
==================

Tests for the read-only location endpoints and the selection endpoint.

Test Coverage:
1. List endpoints - states, districts, mandals
2. Flattened endpoints - all districts, mandals by district only
3. Selection endpoint - field changes, cascade, validation errors
4. Access - no login required

Run tests:
    python manage.py test apps.locations.tests.test_views
"""

import json

from django.test import TestCase, Client
from django.urls import reverse

from apps.locations.registry import get_registry


class LocationListAPITest(TestCase):
    """Test the list endpoints"""

    def setUp(self):
        self.client = Client()
        self.registry = get_registry()

    def test_states(self):
        response = self.client.get(reverse('locations:state_list'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['results'], list(self.registry.list_states()))
        self.assertIn('Andhra Pradesh', response.json()['results'])

    def test_districts_for_state(self):
        response = self.client.get(reverse('locations:district_list'), {'state': 'karnataka'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['results'], ['Bangalore Urban', 'Mangalore', 'Mysore'])

    def test_districts_unknown_state(self):
        """
        Test: Unknown or missing state

        Expected: 200 with an empty list
        """
        response = self.client.get(reverse('locations:district_list'), {'state': 'Narnia'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['results'], [])

        response = self.client.get(reverse('locations:district_list'))
        self.assertEqual(response.json()['results'], [])

    def test_mandals_for_district(self):
        response = self.client.get(
            reverse('locations:mandal_list'),
            {'state': 'Telangana', 'district': 'Hyderabad'},
        )

        self.assertEqual(response.status_code, 200)
        self.assertIn('Ameerpet', response.json()['results'])

    def test_mandals_need_state(self):
        response = self.client.get(reverse('locations:mandal_list'), {'district': 'Hyderabad'})

        self.assertEqual(response.json()['results'], [])

    def test_all_districts(self):
        response = self.client.get(reverse('locations:all_district_list'))

        results = response.json()['results']
        self.assertEqual(results, sorted(set(results)))
        self.assertIn('Leh', results)

    def test_mandals_by_district_only(self):
        response = self.client.get(reverse('locations:mandal_by_district'), {'district': 'North Goa'})

        self.assertEqual(response.json()['results'], ['Bardez', 'Bicholim', 'Pernem', 'Sattari', 'Tiswadi'])

    def test_anonymous_access(self):
        """Location lists are public (used by the public lead form)"""
        response = self.client.get(reverse('locations:state_list'))

        self.assertEqual(response.status_code, 200)


class SelectionTransitionAPITest(TestCase):
    """Test the field-change endpoint used by the cascading selects"""

    def setUp(self):
        self.client = Client()
        self.url = reverse('locations:selection_transition')

    def post(self, payload):
        return self.client.post(self.url, data=json.dumps(payload), content_type='application/json')

    def test_state_change_clears_descendants(self):
        """
        Test: {Telangana, Hyderabad, Ameerpet} + state -> Karnataka

        Expected: district and mandal cleared, Karnataka districts offered
        """
        response = self.post({
            'state': 'Telangana',
            'district': 'Hyderabad',
            'mandal': 'Ameerpet',
            'field': 'state',
            'value': 'Karnataka',
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['state'], 'Karnataka')
        self.assertIsNone(data['district'])
        self.assertIsNone(data['mandal'])
        self.assertEqual(data['district_options'], ['Bangalore Urban', 'Mangalore', 'Mysore'])
        self.assertEqual(data['mandal_options'], [])
        self.assertTrue(data['district_enabled'])
        self.assertFalse(data['mandal_enabled'])

    def test_district_change(self):
        response = self.post({
            'state': 'Andhra Pradesh',
            'field': 'district',
            'value': 'anantapur',
        })

        data = response.json()
        self.assertEqual(data['district'], 'Anantapur')
        self.assertTrue(data['mandal_enabled'])
        self.assertEqual(data['mandal_options'][-1], 'Yellanur')

    def test_foreign_mandal_dropped(self):
        response = self.post({
            'state': 'Telangana',
            'district': 'Hyderabad',
            'field': 'mandal',
            'value': 'Chevella',
        })

        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()['mandal'])

    def test_clear_state(self):
        response = self.post({
            'state': 'Telangana',
            'district': 'Hyderabad',
            'field': 'state',
            'value': '',
        })

        data = response.json()
        self.assertIsNone(data['state'])
        self.assertFalse(data['district_enabled'])

    def test_unknown_field(self):
        """
        Test: field not in state/district/mandal

        Expected: 400 with a 'field' error
        """
        response = self.post({'field': 'village', 'value': 'Anywhere'})

        self.assertEqual(response.status_code, 400)
        self.assertIn('field', response.json())

    def test_missing_field(self):
        response = self.post({'value': 'Goa'})

        self.assertEqual(response.status_code, 400)

    def test_get_not_allowed(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 405)

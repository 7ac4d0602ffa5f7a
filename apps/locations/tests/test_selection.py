"""
Location Selection Tests
========================

Tests for the cascading State -> District -> Mandal selection.

Test Coverage:
1. Transitions - set_state, set_district, set_mandal, clear
2. Cascade invariant - descendants never outlive their ancestors
3. Field-change messages - FieldChange / apply
4. Derived options - district_options, mandal_options, enabled flags

Run tests:
    python manage.py test apps.locations.tests.test_selection
"""

import itertools
import random

from django.test import SimpleTestCase

from apps.locations.data import INDIA_LOCATIONS
from apps.locations.registry import LocationRegistry
from apps.locations.selection import FieldChange, LocationField, LocationSelection


REGISTRY = LocationRegistry.from_records(INDIA_LOCATIONS)


def assert_cascade_invariant(testcase, selection):
    if selection.mandal is not None:
        testcase.assertIsNotNone(selection.district)
        testcase.assertIn(selection.mandal, REGISTRY.list_mandals(selection.state, selection.district))
    if selection.district is not None:
        testcase.assertIsNotNone(selection.state)
        testcase.assertIn(selection.district, REGISTRY.list_districts(selection.state))


class SelectionTransitionTest(SimpleTestCase):
    """Test the three transitions and their cascades"""

    def test_starts_empty(self):
        selection = LocationSelection(REGISTRY)

        self.assertEqual(selection.as_dict(), {'state': None, 'district': None, 'mandal': None})
        self.assertFalse(selection.is_complete)
        self.assertEqual(selection.missing_fields(), ['state', 'district', 'mandal'])

    def test_pre_seeded(self):
        selection = LocationSelection(REGISTRY, state='Andhra Pradesh')

        self.assertEqual(selection.state, 'Andhra Pradesh')
        self.assertIsNone(selection.district)
        self.assertEqual(selection.missing_fields(), ['district', 'mandal'])

    def test_changing_state_clears_descendants(self):
        """
        Test: {Telangana, Hyderabad, Ameerpet} then set_state('Karnataka')

        Expected: {Karnataka, None, None}
        """
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')
        self.assertTrue(selection.is_complete)

        selection.set_state('Karnataka')

        self.assertEqual(selection.as_dict(), {'state': 'Karnataka', 'district': None, 'mandal': None})
        self.assertEqual(selection.district_options, ('Bangalore Urban', 'Mangalore', 'Mysore'))

    def test_setting_same_state_still_clears(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')

        selection.set_state('Telangana')

        self.assertEqual(selection.as_dict(), {'state': 'Telangana', 'district': None, 'mandal': None})

    def test_set_state_idempotent(self):
        once = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')
        once.set_state('Goa')

        twice = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')
        twice.set_state('Goa')
        twice.set_state('Goa')

        self.assertEqual(once, twice)

    def test_changing_district_clears_mandal(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')

        selection.set_district('Medak')

        self.assertEqual(selection.as_dict(), {'state': 'Telangana', 'district': 'Medak', 'mandal': None})

    def test_set_mandal_does_not_cascade(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad')

        selection.set_mandal('Charminar')

        self.assertEqual(selection.as_dict(), {'state': 'Telangana', 'district': 'Hyderabad', 'mandal': 'Charminar'})

    def test_clearing_state_clears_everything(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')

        selection.set_state('')

        self.assertEqual(selection.as_dict(), {'state': None, 'district': None, 'mandal': None})

    def test_clearing_district_clears_mandal(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')

        selection.set_district(None)

        self.assertEqual(selection.as_dict(), {'state': 'Telangana', 'district': None, 'mandal': None})

    def test_clear(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad', 'Ameerpet')

        selection.clear()

        self.assertEqual(selection.missing_fields(), ['state', 'district', 'mandal'])


class SelectionValidationTest(SimpleTestCase):
    """Values that are not on offer are stored as unset"""

    def test_canonical_casing(self):
        selection = LocationSelection(REGISTRY, 'telangana', 'HYDERABAD', 'ameerpet')

        self.assertEqual(selection.as_dict(), {'state': 'Telangana', 'district': 'Hyderabad', 'mandal': 'Ameerpet'})

    def test_unknown_state_is_unset(self):
        selection = LocationSelection(REGISTRY)

        selection.set_state('Narnia')

        self.assertIsNone(selection.state)
        self.assertEqual(selection.district_options, ())

    def test_district_from_other_state_is_dropped(self):
        """
        Test: District picked from a stale option list

        Expected: district stays unset
        """
        selection = LocationSelection(REGISTRY, 'Karnataka')

        selection.set_district('Hyderabad')

        self.assertEqual(selection.state, 'Karnataka')
        self.assertIsNone(selection.district)

    def test_district_without_state_is_dropped(self):
        selection = LocationSelection(REGISTRY)

        selection.set_district('Hyderabad')

        self.assertIsNone(selection.district)

    def test_mandal_from_other_district_is_dropped(self):
        selection = LocationSelection(REGISTRY, 'Telangana', 'Hyderabad')

        selection.set_mandal('Chevella')

        self.assertIsNone(selection.mandal)

    def test_mandal_without_district_is_dropped(self):
        selection = LocationSelection(REGISTRY, 'Telangana')

        selection.set_mandal('Ameerpet')

        self.assertIsNone(selection.mandal)

    def test_invariant_holds_for_random_sequences(self):
        """
        Test: Random mix of valid, foreign and blank values on every level

        Expected: mandal set => district set => state set after every call
        """
        rng = random.Random(2024)
        states = list(REGISTRY.list_states()) + ['Narnia', '', None]
        districts = list(REGISTRY.list_all_districts()) + ['Nowhere', '', None]
        mandals = ['Ameerpet', 'Anantapur', 'Yellanur', 'Leh', 'Charminar', 'Nowhere', '', None]

        selection = LocationSelection(REGISTRY)
        for _ in range(500):
            field = rng.choice(list(LocationField))
            if field is LocationField.STATE:
                value = rng.choice(states)
            elif field is LocationField.DISTRICT:
                value = rng.choice(selection.district_options + tuple(rng.sample(districts, 3)))
            else:
                value = rng.choice(selection.mandal_options + tuple(mandals))

            selection.apply(FieldChange(field, value))
            assert_cascade_invariant(self, selection)


class FieldChangeTest(SimpleTestCase):

    def test_apply_dispatches_by_field(self):
        selection = LocationSelection(REGISTRY)

        for field, value in [('state', 'Goa'), ('district', 'North Goa'), ('mandal', 'Bardez')]:
            selection.apply(FieldChange.from_raw(field, value))

        self.assertEqual(selection.as_dict(), {'state': 'Goa', 'district': 'North Goa', 'mandal': 'Bardez'})

    def test_apply_state_change_cascades(self):
        selection = LocationSelection(REGISTRY, 'Goa', 'North Goa', 'Bardez')

        selection.apply(FieldChange(LocationField.STATE, 'Ladakh'))

        self.assertEqual(selection.as_dict(), {'state': 'Ladakh', 'district': None, 'mandal': None})

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValueError):
            FieldChange.from_raw('village', 'Anywhere')


class SelectionOptionsTest(SimpleTestCase):
    """Test derived option lists and enabled flags"""

    def test_no_state(self):
        selection = LocationSelection(REGISTRY)

        self.assertEqual(selection.district_options, ())
        self.assertEqual(selection.mandal_options, ())
        self.assertFalse(selection.district_enabled)
        self.assertFalse(selection.mandal_enabled)

    def test_state_only(self):
        selection = LocationSelection(REGISTRY, 'Andhra Pradesh')

        self.assertTrue(selection.district_enabled)
        self.assertFalse(selection.mandal_enabled)
        self.assertIn('Anantapur', selection.district_options)
        self.assertEqual(selection.mandal_options, ())

    def test_options_follow_current_ancestors(self):
        selection = LocationSelection(REGISTRY, 'Andhra Pradesh', 'Anantapur')
        self.assertEqual(selection.mandal_options[-1], 'Yellanur')

        selection.set_district('Kurnool')

        self.assertNotIn('Yellanur', selection.mandal_options)
        self.assertEqual(selection.mandal_options, REGISTRY.list_mandals('Andhra Pradesh', 'Kurnool'))

    def test_every_state_district_pair_completes(self):
        for state, district in itertools.islice(
                ((s, d) for s in REGISTRY.list_states() for d in REGISTRY.list_districts(s)), 50):
            selection = LocationSelection(REGISTRY, state, district)

            self.assertEqual(selection.district, district)
            self.assertTrue(selection.mandal_options)

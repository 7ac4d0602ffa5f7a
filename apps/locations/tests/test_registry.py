"""
Location Registry Tests
=======================

Tests for the State -> District -> Mandal registry.

Test Coverage:
1. Construction - from_records, duplicate detection
2. Queries - list_states, list_districts, list_mandals
3. Flattened views - list_all_districts, list_mandals_by_district_only
4. Resolvers - canonical casing
5. Default registry - LOCATIONS_DATASET setting

Run tests:
    python manage.py test apps.locations.tests.test_registry
"""

from django.test import SimpleTestCase, override_settings

from apps.locations.data import INDIA_LOCATIONS
from apps.locations.registry import LocationRegistry, get_registry, load_registry, normalize_name


# Small dataset with a district name shared by two states
SAMPLE_LOCATIONS = [
    {
        'state': 'Zeta Pradesh',
        'districts': [
            {'district': 'Riverside', 'mandals': ['Ozone', 'Alpha', 'Alpha', 'Midway']},
            {'district': 'Hilltop', 'mandals': ['Summit']},
        ],
    },
    {
        'state': 'Alpha Desh',
        'districts': [
            {'district': 'Riverside', 'mandals': ['Delta', 'Bravo']},
            {'district': 'Coast', 'mandals': []},
        ],
    },
]


class RegistryConstructionTest(SimpleTestCase):
    """Test building a registry from records"""

    def test_from_records(self):
        registry = LocationRegistry.from_records(SAMPLE_LOCATIONS)

        self.assertEqual(len(registry), 2)
        self.assertEqual([state.name for state in registry], ['Zeta Pradesh', 'Alpha Desh'])
        self.assertIn('zeta pradesh', registry)
        self.assertNotIn('Narnia', registry)

    def test_duplicate_state_rejected(self):
        """
        Test: Two records for the same state (any casing)

        Expected: ValueError
        """
        records = [
            {'state': 'Goa', 'districts': []},
            {'state': 'GOA', 'districts': []},
        ]

        with self.assertRaises(ValueError):
            LocationRegistry.from_records(records)

    def test_duplicate_district_within_state_rejected(self):
        records = [
            {'state': 'Goa', 'districts': [
                {'district': 'North Goa', 'mandals': []},
                {'district': 'north goa', 'mandals': []},
            ]},
        ]

        with self.assertRaises(ValueError):
            LocationRegistry.from_records(records)

    def test_blank_state_rejected(self):
        with self.assertRaises(ValueError):
            LocationRegistry.from_records([{'state': '  ', 'districts': []}])

    def test_entities_are_immutable(self):
        registry = LocationRegistry.from_records(SAMPLE_LOCATIONS)
        state = registry.get_state('Alpha Desh')

        with self.assertRaises(Exception):
            state.name = 'Changed'

        self.assertIsInstance(state.districts, tuple)
        self.assertIsInstance(state.districts[0].mandals, tuple)

    def test_normalize_name(self):
        self.assertEqual(normalize_name('  Andhra PRADESH '), 'andhra pradesh')
        self.assertEqual(normalize_name(None), '')
        self.assertEqual(normalize_name(''), '')
        self.assertEqual(normalize_name(42), '')


class RegistryQueryTest(SimpleTestCase):
    """Test list queries on a small dataset"""

    def setUp(self):
        self.registry = LocationRegistry.from_records(SAMPLE_LOCATIONS)

    def test_list_states_sorted(self):
        self.assertEqual(self.registry.list_states(), ('Alpha Desh', 'Zeta Pradesh'))

    def test_list_districts_sorted(self):
        self.assertEqual(self.registry.list_districts('Zeta Pradesh'), ('Hilltop', 'Riverside'))

    def test_list_districts_case_insensitive(self):
        self.assertEqual(
            self.registry.list_districts('zeta pradesh'),
            self.registry.list_districts('ZETA PRADESH'),
        )

    def test_list_districts_lookup_miss(self):
        """
        Test: Unknown, blank or missing state

        Expected: empty tuple, never an exception
        """
        self.assertEqual(self.registry.list_districts('Narnia'), ())
        self.assertEqual(self.registry.list_districts(''), ())
        self.assertEqual(self.registry.list_districts('   '), ())
        self.assertEqual(self.registry.list_districts(None), ())

    def test_list_mandals_sorted_and_deduplicated(self):
        self.assertEqual(
            self.registry.list_mandals('Zeta Pradesh', 'Riverside'),
            ('Alpha', 'Midway', 'Ozone'),
        )

    def test_list_mandals_scoped_to_state(self):
        """Same district name in two states keeps separate mandal lists"""
        self.assertEqual(self.registry.list_mandals('alpha desh', 'riverside'), ('Bravo', 'Delta'))

    def test_list_mandals_lookup_miss(self):
        self.assertEqual(self.registry.list_mandals('Zeta Pradesh', 'Coast'), ())
        self.assertEqual(self.registry.list_mandals('Narnia', 'Riverside'), ())
        self.assertEqual(self.registry.list_mandals(None, 'Riverside'), ())
        self.assertEqual(self.registry.list_mandals('Zeta Pradesh', None), ())
        self.assertEqual(self.registry.list_mandals('Alpha Desh', 'Coast'), ())

    def test_list_all_districts_collapses_duplicates(self):
        self.assertEqual(self.registry.list_all_districts(), ('Coast', 'Hilltop', 'Riverside'))

    def test_mandals_by_district_only_uses_first_state(self):
        """
        Test: District name present in two states

        Expected: mandals of the first state in registry order (Zeta Pradesh)
        """
        self.assertEqual(
            self.registry.list_mandals_by_district_only('RIVERSIDE'),
            ('Alpha', 'Midway', 'Ozone'),
        )

    def test_mandals_by_district_only_miss(self):
        self.assertEqual(self.registry.list_mandals_by_district_only('Nowhere'), ())
        self.assertEqual(self.registry.list_mandals_by_district_only(''), ())

    def test_resolvers_return_canonical_names(self):
        self.assertEqual(self.registry.resolve_state('alpha desh'), 'Alpha Desh')
        self.assertEqual(self.registry.resolve_district('alpha desh', 'COAST'), 'Coast')
        self.assertEqual(self.registry.resolve_mandal('zeta pradesh', 'riverside', 'midway'), 'Midway')

    def test_resolvers_miss(self):
        self.assertIsNone(self.registry.resolve_state('Narnia'))
        self.assertIsNone(self.registry.resolve_district('Alpha Desh', 'Hilltop'))
        self.assertIsNone(self.registry.resolve_mandal('Alpha Desh', 'Riverside', 'Ozone'))
        self.assertIsNone(self.registry.resolve_mandal('Alpha Desh', None, 'Delta'))


class IndiaDatasetTest(SimpleTestCase):
    """Test the bundled India dataset"""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.registry = LocationRegistry.from_records(INDIA_LOCATIONS)

    def test_every_state_has_sorted_unique_districts(self):
        for state in self.registry.list_states():
            districts = self.registry.list_districts(state)

            self.assertTrue(districts, f'{state} has no districts')
            self.assertEqual(list(districts), sorted(set(districts)))

    def test_every_district_has_sorted_unique_mandals(self):
        for state in self.registry.list_states():
            for district in self.registry.list_districts(state):
                mandals = self.registry.list_mandals(state, district)
                self.assertEqual(list(mandals), sorted(set(mandals)))

    def test_andhra_pradesh_case_insensitive(self):
        self.assertEqual(
            self.registry.list_districts('andhra pradesh'),
            self.registry.list_districts('Andhra Pradesh'),
        )

    def test_karnataka_districts(self):
        self.assertEqual(
            self.registry.list_districts('Karnataka'),
            ('Bangalore Urban', 'Mangalore', 'Mysore'),
        )

    def test_anantapur_mandals(self):
        mandals = self.registry.list_mandals('Andhra Pradesh', 'Anantapur')

        self.assertEqual(mandals[0], 'Anantapur')
        self.assertEqual(mandals[-1], 'Yellanur')

    def test_telangana_hyderabad_contains_ameerpet(self):
        self.assertIn('Ameerpet', self.registry.list_mandals('Telangana', 'Hyderabad'))

    def test_all_districts_flattened(self):
        all_districts = self.registry.list_all_districts()

        self.assertEqual(list(all_districts), sorted(set(all_districts)))
        self.assertIn('Anantapur', all_districts)
        self.assertIn('Leh', all_districts)

    def test_mandals_by_district_only(self):
        self.assertEqual(
            self.registry.list_mandals_by_district_only('hyderabad'),
            self.registry.list_mandals('Telangana', 'Hyderabad'),
        )


class DefaultRegistryTest(SimpleTestCase):

    def tearDown(self):
        load_registry.cache_clear()

    def test_default_registry_is_cached(self):
        self.assertIs(get_registry(), get_registry())
        self.assertIn('Andhra Pradesh', get_registry())

    @override_settings(LOCATIONS_DATASET='apps.locations.tests.test_registry.SAMPLE_LOCATIONS')
    def test_dataset_setting_swaps_registry(self):
        registry = get_registry()

        self.assertEqual(registry.list_states(), ('Alpha Desh', 'Zeta Pradesh'))

"""
Shared fixtures: a fixed clock and isolated registries.
"""
from datetime import datetime, timezone

import pytest

from elapsed.localization.formatter import ElapsedFormatter
from elapsed.localization.languages import LocaleRegistry, REFERENCE_PHRASES
from elapsed.util import config

NOW = datetime(2024, 1, 15, 12, 0, 0)
NOW_UTC = NOW.replace(tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def registry():
    """Registry holding only the reference locale"""
    return LocaleRegistry()


@pytest.fixture
def builtin_registry():
    """Registry seeded with the bundled language files"""
    return LocaleRegistry(languages_dir=config.LANGUAGES_DIR)


@pytest.fixture
def formatter(builtin_registry):
    return ElapsedFormatter(builtin_registry, clock=lambda then: NOW_UTC if then.tzinfo else NOW)


@pytest.fixture
def french_table():
    return {
        'not_yet': 'pas encore',
        'just_now': "à l'instant",
        'minute': 'il y a %d minute',
        'minutes': 'il y a %d minutes',
        'hour': 'il y a %d heure',
        'hours': 'il y a %d heures',
        'yesterday': 'hier',
        'day': 'il y a %d jour',
        'days': 'il y a %d jours',
        'week': 'il y a %d semaine',
        'weeks': 'il y a %d semaines',
        'month': 'il y a %d mois',
        'months': 'il y a %d mois',
        'year': 'il y a %d an',
        'years': 'il y a %d ans',
    }


@pytest.fixture
def reference_table():
    return dict(REFERENCE_PHRASES)

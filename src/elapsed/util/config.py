import os

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

LANGUAGES_DIR = os.path.join(PACKAGE_DIR, 'localization', 'locales')
LANGUAGE_FILE_EXTENSION = '.json'

REFERENCE_LOCALE = 'en'

PLACEHOLDER = '%d'

LOG_LEVEL = 'WARNING'

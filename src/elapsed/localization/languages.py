import json
import logging
import os
import threading
from types import MappingProxyType
from typing import Mapping, Optional, Union

from elapsed.util import config, formatting
from .exceptions import AlreadyExists, Incomplete, InvalidCode, InvalidTemplate, RegistrationError
from .timeutils import Bucket

PhraseTable = Mapping[Bucket, str]

REFERENCE_PHRASES = {
    Bucket.NOT_YET: 'not yet',
    Bucket.JUST_NOW: 'just now',
    Bucket.MINUTE: '%d minute ago',
    Bucket.MINUTES: '%d minutes ago',
    Bucket.HOUR: '%d hour ago',
    Bucket.HOURS: '%d hours ago',
    Bucket.YESTERDAY: 'yesterday',
    Bucket.DAY: '%d day ago',
    Bucket.DAYS: '%d days ago',
    Bucket.WEEK: '%d week ago',
    Bucket.WEEKS: '%d weeks ago',
    Bucket.MONTH: '%d month ago',
    Bucket.MONTHS: '%d months ago',
    Bucket.YEAR: '%d year ago',
    Bucket.YEARS: '%d years ago',
}


def to_bucket(key: Union[Bucket, str]) -> Optional[Bucket]:
    if isinstance(key, Bucket):
        return key

    try:
        return Bucket(key)
    except ValueError:
        return None


def build_table(code: str, table: Mapping, required: tuple) -> dict:
    if not isinstance(table, Mapping):
        raise Incomplete(code, required)

    phrases = {}

    for key, template in table.items():
        bucket = to_bucket(key)

        if bucket is None:
            logging.warning(f'Ignoring unknown phrase {key!r} in locale {code}')
            continue

        if not isinstance(template, str) or formatting.placeholders(template) > 1:
            raise InvalidTemplate(code, bucket, template)

        phrases[bucket] = template

    missing = tuple(bucket for bucket in required if bucket not in phrases)

    if missing:
        raise Incomplete(code, missing)

    return phrases


class LocaleRegistry:
    """Locale code to phrase table mapping.

    Readers use the current snapshot without locking. Writers build a new
    snapshot under a lock and swap it in, so a reader sees either the old
    set of locales or the new one, never a half-installed table.
    """

    def __init__(self, reference: str = config.REFERENCE_LOCALE,
                 reference_table: PhraseTable = None,
                 languages_dir: Optional[str] = None):
        self.reference = reference
        self._lock = threading.Lock()

        if reference_table is None:
            reference_table = REFERENCE_PHRASES

        # every bucket must resolve in the reference locale
        phrases = build_table(reference, reference_table, tuple(Bucket))
        self._tables = {reference: MappingProxyType(phrases)}

        if languages_dir:
            self.load_directory(languages_dir)

    def __contains__(self, code) -> bool:
        return code in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    @property
    def locales(self) -> tuple:
        return tuple(sorted(self._tables))

    @property
    def reference_table(self) -> PhraseTable:
        return self._tables[self.reference]

    def get(self, code: Optional[str]) -> PhraseTable:
        tables = self._tables

        if code in tables:
            return tables[code]

        logging.debug(f'Locale {code!r} is not registered, using {self.reference}')
        return tables[self.reference]

    def get_nearest(self, code: Optional[str]) -> str:
        if not code or not isinstance(code, str):
            return self.reference

        code = code.strip()

        if code in self._tables:
            return code

        base = code.replace('-', '_').split('_')[0]

        if base in self._tables:
            return base

        return self.reference

    def resolve(self, bucket: Bucket, magnitude: int, code: Optional[str] = None) -> str:
        template = self.get(code)[bucket]

        return formatting.substitute(template, magnitude)

    def validate(self, code: str, table: Mapping) -> dict:
        return build_table(code, table, tuple(self.reference_table))

    def add(self, code: str, table: Mapping):
        if not isinstance(code, str) or not code.strip():
            raise InvalidCode(code)

        code = code.strip()

        if code in self._tables:
            raise AlreadyExists(code)

        phrases = self.validate(code, table)

        with self._lock:
            if code in self._tables:
                raise AlreadyExists(code)

            tables = dict(self._tables)
            tables[code] = MappingProxyType(phrases)
            self._tables = tables

        logging.info(f'Registered locale {code}')

    def load_file(self, file_name: str) -> str:
        code = os.path.splitext(os.path.basename(file_name))[0]

        with open(file_name, 'r', encoding='utf-8') as file:
            self.add(code, json.load(file))

        return code

    def load_directory(self, directory: str = config.LANGUAGES_DIR) -> list:
        logging.info('Loading languages...')
        loaded = []

        for file_name in sorted(os.listdir(directory)):
            if not file_name.endswith(config.LANGUAGE_FILE_EXTENSION):
                continue

            path = os.path.join(directory, file_name)

            try:
                loaded.append(self.load_file(path))
            except (OSError, ValueError, RegistrationError) as e:
                logging.warning(f'Skipping language file {file_name}: {e}')

        logging.info(f'Loaded {len(loaded)} languages!')

        return loaded


def create_registry(languages_dir: Optional[str] = config.LANGUAGES_DIR) -> LocaleRegistry:
    return LocaleRegistry(languages_dir=languages_dir)

"""
Locale registration errors.
"""


class RegistrationError(Exception):
    """Base exception for locale registration failures"""
    code = 'REGISTRATION_ERROR'

    def __init__(self, locale: str, message: str):
        super().__init__(message)
        self.locale = locale


class InvalidCode(RegistrationError):
    """Raised when the locale code is empty or blank"""
    code = 'INVALID_CODE'

    def __init__(self, locale):
        super().__init__(locale, f'Invalid locale code: {locale!r}')


class AlreadyExists(RegistrationError):
    """Raised when the locale code is already registered"""
    code = 'ALREADY_EXISTS'

    def __init__(self, locale: str):
        super().__init__(locale, f'Locale already registered: {locale}')


class Incomplete(RegistrationError):
    """Raised when the phrase table lacks buckets of the reference locale"""
    code = 'INCOMPLETE'

    def __init__(self, locale: str, missing: tuple):
        names = ', '.join(bucket.value for bucket in missing)
        super().__init__(locale, f'Locale {locale} is missing phrases for: {names}')
        self.missing = missing


class InvalidTemplate(RegistrationError):
    """Raised when a phrase is not a string or holds more than one placeholder"""
    code = 'INVALID_TEMPLATE'

    def __init__(self, locale: str, bucket, template):
        super().__init__(locale, f'Invalid phrase for {bucket.value} in locale {locale}: {template!r}')
        self.bucket = bucket

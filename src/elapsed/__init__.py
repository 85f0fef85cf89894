from .localization.exceptions import (
    AlreadyExists,
    Incomplete,
    InvalidCode,
    InvalidTemplate,
    RegistrationError,
)
from .localization.formatter import (
    ElapsedFormatter,
    format_elapsed,
    format_elapsed_localized,
    get_default,
    register_locale,
)
from .localization.languages import LocaleRegistry, REFERENCE_PHRASES
from .localization.timeutils import Bucket, classify

__all__ = [
    'AlreadyExists',
    'Bucket',
    'ElapsedFormatter',
    'Incomplete',
    'InvalidCode',
    'InvalidTemplate',
    'LocaleRegistry',
    'REFERENCE_PHRASES',
    'RegistrationError',
    'classify',
    'format_elapsed',
    'format_elapsed_localized',
    'get_default',
    'register_locale',
]

import re

from . import config

ESCAPED_PERCENT = '%%'
TOKEN = re.compile(re.escape(ESCAPED_PERCENT) + '|' + re.escape(config.PLACEHOLDER))


def placeholders(template: str) -> int:
    return sum(1 for token in TOKEN.findall(template) if token == config.PLACEHOLDER)


def has_placeholder(template: str) -> bool:
    return placeholders(template) > 0


def substitute(template: str, magnitude: int) -> str:
    """Fills the %d placeholder, a doubled %% stands for a literal percent sign."""
    if '%' not in template:
        return template

    def replace(match):
        if match.group() == ESCAPED_PERCENT:
            return '%'

        return str(int(magnitude))

    return TOKEN.sub(replace, template)

from functools import lru_cache

from mako.lookup   import TemplateLookup
from mako.template import Template

from .common import LBCASE_TEMPLATE_DIR, LBCaseException


@lru_cache(maxsize=None)
def get_lookup() -> TemplateLookup:
    return TemplateLookup(directories=[LBCASE_TEMPLATE_DIR])


def get_template(name: str) -> Template:
    try:
        return get_lookup().get_template(name)
    except Exception as exc:
        raise LBCaseException(f"Failed to load template '{name}' from {LBCASE_TEMPLATE_DIR}: {exc}") from exc

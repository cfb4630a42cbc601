"""Default resolver bootstrap (import side-effect)."""
from .api import set_resolver
from .bootstrap import build_registry
from .resolver import CalendarResolver

set_resolver(CalendarResolver(build_registry()))

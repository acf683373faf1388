__version__ = "0.1"

from .components import Components
from .exceptions import NuriError, UriSyntaxError
from .parse import RawComponents, split
from .resolve import resolve
from .schemes import SCHEMES, SchemePolicy, default_port
from .uri import Uri

__all__ = ["Components", "NuriError", "RawComponents", "SCHEMES", "SchemePolicy", "Uri", "UriSyntaxError", "default_port", "resolve", "split"]

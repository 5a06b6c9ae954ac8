from .config import DemoConfig as DemoConfig
from .config import OutputConfig as OutputConfig
from .config import config_from_file as config_from_file
from .config import get_config as get_config
from .config import set_config as set_config
from .demo import Demonstrator as Demonstrator
from .demo import Traversal as Traversal
from .ds import AssociativeMap as AssociativeMap
from .ds import Record as Record
from .errors import KeywalkError as KeywalkError
from .errors import NotIterableError as NotIterableError
from .traversal import KeySequence as KeySequence
from .traversal import enumerate_own_keys as enumerate_own_keys
from .traversal import iterate_entries as iterate_entries
from .traversal import iterate_keys as iterate_keys
from .traversal import iterate_values as iterate_values

VERSION = "0.1.0"
__version__ = VERSION

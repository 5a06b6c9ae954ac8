from .assoc import AssociativeMap as AssociativeMap
from .record import Record as Record

from .AbstractCxxDemangler import AbstractCxxDemangler
from .CallableCxxDemangler import CallableCxxDemangler

"""IceCube definition model and EPICS generator."""

from .cube import IceCube as IceCube
from .epics import TAG_ALPHABET as TAG_ALPHABET
from .epics import render_db as render_db
from .epics import render_proto as render_proto
from .errors import *
from .types import *
from .validate import check_name as check_name
from .validate import is_valid_name as is_valid_name

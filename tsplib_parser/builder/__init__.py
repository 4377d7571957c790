from .builder import TspBuilder, split_entry
from .validator import validate_data, validate_spec

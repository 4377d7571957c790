# Keywords of the TSPLIB specification part and section headers of the data part.

# Specification part
NAME = "NAME"
TYPE = "TYPE"
COMMENT = "COMMENT"
DIMENSION = "DIMENSION"
CAPACITY = "CAPACITY"
EDGE_WEIGHT_TYPE = "EDGE_WEIGHT_TYPE"
EDGE_WEIGHT_FORMAT = "EDGE_WEIGHT_FORMAT"
EDGE_DATA_FORMAT = "EDGE_DATA_FORMAT"
NODE_COORD_TYPE = "NODE_COORD_TYPE"
DISPLAY_DATA_TYPE = "DISPLAY_DATA_TYPE"

# Data part
NODE_COORD_SECTION = "NODE_COORD_SECTION"
DEPOT_SECTION = "DEPOT_SECTION"
DEMAND_SECTION = "DEMAND_SECTION"
EDGE_DATA_SECTION = "EDGE_DATA_SECTION"
FIXED_EDGES_SECTION = "FIXED_EDGES_SECTION"
DISPLAY_DATA_SECTION = "DISPLAY_DATA_SECTION"
TOUR_SECTION = "TOUR_SECTION"
EDGE_WEIGHT_SECTION = "EDGE_WEIGHT_SECTION"

EOF_MARKER = "EOF"

SPEC_KEYS = (NAME, TYPE, COMMENT, DIMENSION, CAPACITY, EDGE_WEIGHT_TYPE, EDGE_WEIGHT_FORMAT,
             EDGE_DATA_FORMAT, NODE_COORD_TYPE, DISPLAY_DATA_TYPE)
SECTIONS = (NODE_COORD_SECTION, DEPOT_SECTION, DEMAND_SECTION, EDGE_DATA_SECTION,
            FIXED_EDGES_SECTION, DISPLAY_DATA_SECTION, TOUR_SECTION, EDGE_WEIGHT_SECTION)

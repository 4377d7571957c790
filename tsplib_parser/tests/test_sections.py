# tsplib_parser/tests/test_sections.py
import pytest

from tsplib_parser import TspBuilder, InvalidEntryError, OtherError
from tsplib_parser.cursor import LineCursor

TOUR_HEADER = ["NAME: t", "TYPE: TOUR", "DIMENSION: 4", "TOUR_SECTION"]
HCP_HEADER = ["NAME: h", "TYPE: HCP", "DIMENSION: 4"]


def _tours(*body):
    return [list(t) for t in TspBuilder.parse_str("\n".join(TOUR_HEADER + list(body))).tours]


# ---------- tours ----------
def test_single_tour_on_one_line():
    assert _tours("4 3 2 1", "-1", "EOF") == [[4, 3, 2, 1]]


def test_single_tour_one_id_per_line():
    assert _tours("1", "3", "2", "4", "-1", "EOF") == [[1, 3, 2, 4]]


def test_two_tours():
    tours = _tours("1 2", "3 4", "-1", "4 3", "2 1", "-1", "EOF")
    assert tours == [[1, 2, 3, 4], [4, 3, 2, 1]]


def test_double_sentinel_ends_section():
    tours = _tours("1 2 3 4", "-1", "-1", "EOF")
    assert tours == [[1, 2, 3, 4]]


def test_sentinels_on_the_same_line():
    assert _tours("1 2 3 4 -1", "2 1 4 3 -1 -1", "EOF") == [[1, 2, 3, 4], [2, 1, 4, 3]]


def test_tour_without_eof():
    assert _tours("4 3 2 1", "-1") == [[4, 3, 2, 1]]
    assert _tours("4 3 2 1") == [[4, 3, 2, 1]]


def test_tour_section_followed_by_another_section():
    text = "\n".join(["NAME: t", "TYPE: TSP", "DIMENSION: 2", "EDGE_WEIGHT_TYPE: EUC_2D",
                      "TOUR_SECTION", "1 2", "-1",
                      "NODE_COORD_SECTION", "1 0 0", "2 0 1", "EOF"])
    tsp = TspBuilder.parse_str(text)
    assert tsp.tours == ((1, 2),)
    assert tsp.weight(1, 2) == 1.0


def test_bad_tour_id():
    with pytest.raises(InvalidEntryError):
        _tours("1 x 3", "-1", "EOF")


# ---------- depots and demands ----------
def test_depots_collapse_duplicates():
    text = "\n".join(["NAME: v", "TYPE: CVRP", "DIMENSION: 3", "CAPACITY: 9",
                      "EDGE_WEIGHT_TYPE: EUC_2D", "NODE_COORD_SECTION",
                      "1 0 0", "2 0 1", "3 1 1",
                      "DEPOT_SECTION", "1", "2", "1", "-1", "EOF"])
    tsp = TspBuilder.parse_str(text)
    assert tsp.depots == {1, 2}


def test_depot_section_needs_sentinel():
    text = "\n".join(["NAME: v", "TYPE: CVRP", "DIMENSION: 1", "CAPACITY: 9",
                      "EDGE_WEIGHT_TYPE: EUC_2D", "DEPOT_SECTION", "1"])
    with pytest.raises(InvalidEntryError) as exc:
        TspBuilder.parse_str(text)
    assert exc.value.entry == "DEPOT_SECTION"


def test_demand_lines_need_two_values():
    text = "\n".join(["NAME: v", "TYPE: CVRP", "DIMENSION: 2", "CAPACITY: 9",
                      "EDGE_WEIGHT_TYPE: EUC_2D", "DEMAND_SECTION", "1 0", "2", "EOF"])
    with pytest.raises(InvalidEntryError):
        TspBuilder.parse_str(text)


# ---------- edges ----------
def test_edge_list():
    text = "\n".join(HCP_HEADER + ["EDGE_DATA_FORMAT: EDGE_LIST", "EDGE_DATA_SECTION",
                                   "1 2", "2 3", "3 4", "4 1", "-1", "EOF"])
    tsp = TspBuilder.parse_str(text)
    assert tsp.edges == ((1, 2), (2, 3), (3, 4), (4, 1))


def test_edge_data_without_format():
    text = "\n".join(["NAME: h", "TYPE: TSP", "DIMENSION: 4", "EDGE_WEIGHT_TYPE: EUC_2D",
                      "EDGE_DATA_SECTION", "1 2", "-1", "EOF"])
    with pytest.raises(InvalidEntryError) as exc:
        TspBuilder.parse_str(text)
    assert exc.value.entry == "EDGE_DATA_FORMAT"


def test_adjacency_list_is_unsupported():
    text = "\n".join(HCP_HEADER + ["EDGE_DATA_FORMAT: ADJ_LIST", "EDGE_DATA_SECTION",
                                   "1 2 3 -1", "-1", "EOF"])
    with pytest.raises(OtherError):
        TspBuilder.parse_str(text)


def test_fixed_edges():
    text = "\n".join(HCP_HEADER + ["EDGE_DATA_FORMAT: EDGE_LIST",
                                   "FIXED_EDGES_SECTION", "1 2", "3 4", "-1",
                                   "EDGE_DATA_SECTION", "1 2", "-1", "EOF"])
    tsp = TspBuilder.parse_str(text)
    assert tsp.fixed_edges == ((1, 2), (3, 4))
    assert tsp.edges == ((1, 2),)


# ---------- display data ----------
def test_display_data_keeps_file_order():
    text = "\n".join(["NAME: d", "TYPE: TSP", "DIMENSION: 3", "EDGE_WEIGHT_TYPE: EXPLICIT",
                      "EDGE_WEIGHT_FORMAT: UPPER_ROW", "DISPLAY_DATA_TYPE: TWOD_DISPLAY",
                      "EDGE_WEIGHT_SECTION", "1 2 3",
                      "DISPLAY_DATA_SECTION", "3 5 6", "1 1 2", "2 3 4", "EOF"])
    tsp = TspBuilder.parse_str(text)
    assert [p.id for p in tsp.disp_coords] == [3, 1, 2]
    assert tsp.disp_coords[0].pos == (5.0, 6.0)
    assert tsp.node_coords == {}


# ---------- cursor ----------
def test_cursor_skips_blanks_and_peeks():
    cursor = LineCursor(["  a ", "", "   ", "b", "c  "])
    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.next_line() == "a"
    assert cursor.next_line() == "b"
    assert cursor.lineno == 4
    assert list(cursor) == ["c"]
    assert cursor.peek() is None
    assert cursor.next_line() is None

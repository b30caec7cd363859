import logging
import operator

import pytest

from wgraph import MalformedEdgeLine, parse_edge_list, read_edge_list
from helpers import MERA_ORDER, check_invariants


MERA_TEXT = """\
1 2 2
1 3 2
1 4 2
2 3 2
2 4 2
2 5 2
3 5 2
4 5 2
4 6 2
5 7 2
6 7 2
"""


def test_parse_edge_list_keeps_line_order():
    g = parse_edge_list(["3 1 7\n", "1   2\t5", "2 3 4\r\n"])
    assert list(g.nodes()) == [3, 1, 2]
    assert list(g.edges()) == [(1, 3), (1, 2), (2, 3)]
    assert g.get_weight(2, 1) == 5
    check_invariants(g)


def test_parse_edge_list_duplicates_keep_first_weight():
    g = parse_edge_list(["1 2 5", "2 1 9"])
    assert g.size == 1
    assert g.get_weight(1, 2) == 5


@pytest.mark.parametrize(
    "bad",
    ["1 2", "1 2 x", "-1 2 3", "1,2,3", "", "\n", "1 2 3 4", " 1 2 3", "1.5 2 3"],
)
def test_parse_edge_list_rejects_malformed(bad):
    with pytest.raises(MalformedEdgeLine) as info:
        parse_edge_list(["1 2 3", bad, "4 5 6"])
    assert info.value.lineno == 2


def test_parse_edge_list_converters_and_options():
    g = parse_edge_list(["1 2 3"], vertex_type=str, weight_type=float, allow_self_loops=False)
    assert g.contains_edge("1", "2")
    assert g.get_weight("2", "1") == 3.0
    with pytest.raises(ValueError):
        parse_edge_list(["1 1 3"], allow_self_loops=False)
    with pytest.raises(OverflowError):
        parse_edge_list(["1 2 3", "3 4 5"], max_vertices=3)


def test_read_edge_list(tmp_path, caplog):
    path = tmp_path / "mera.ew"
    path.write_text(MERA_TEXT, encoding="utf-8")

    caplog.set_level(logging.INFO, logger="wgraph.io")
    g = read_edge_list(path)

    assert g.order == 7
    assert g.size == 11
    assert "order=7, size=11" in caplog.text
    assert g.contract_edges(MERA_ORDER, 0, operator.mul) == 204


def test_read_edge_list_aborts_on_malformed_line(tmp_path):
    path = tmp_path / "broken.ew"
    path.write_text("1 2 3\n2 3 oops\n3 4 5\n", encoding="utf-8")
    with pytest.raises(MalformedEdgeLine) as info:
        read_edge_list(str(path))
    assert info.value.lineno == 2
    assert info.value.line == "2 3 oops"
    assert isinstance(info.value, ValueError)


def test_read_edge_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_edge_list(tmp_path / "nope.ew")


def test_parse_edge_list_accepts_ascii_digits_only():
    with pytest.raises(MalformedEdgeLine):
        parse_edge_list(["١٢ ٣ ٤"])
    with pytest.raises(MalformedEdgeLine):
        parse_edge_list(["1 2 ３"])

"""
Unit tests for the article/link text loaders.
"""

import pytest

from wikipath.data import decode_label, load_graph, read_edges, read_labels
from wikipath.errors import DataFormatError, DuplicateLabelError, UnknownLabelInEdgeError

ARTICLES = """\
# The list of all articles.
# Article names are URL-encoded.

A
B
%C3%89cole
D_E
"""

LINKS = """\
# Links: source <tab> target

A\tB
B\t%C3%89cole
A  D_E
D_E\t%C3%89cole
"""


class TestDecodeLabel:
    """Test percent-decoding of labels."""

    def test_plain(self):
        assert decode_label("Albert_Einstein") == "Albert_Einstein"

    def test_utf8_escapes(self):
        assert decode_label("%C3%89cole") == "École"

    def test_punctuation(self):
        assert decode_label("AC%2FDC") == "AC/DC"

    def test_plus_is_literal(self):
        """A plus sign is kept as-is; only percent-escapes are decoded."""
        assert decode_label("C++") == "C++"
        assert decode_label("Rock+roll") == "Rock+roll"
        assert decode_label("New%20York") == "New York"


class TestReadLabels:
    """Test the article file reader."""

    def test_skips_comments_and_blanks(self, write_data_files):
        articles, _ = write_data_files(ARTICLES, LINKS)
        assert list(read_labels(articles)) == ["A", "B", "École", "D_E"]

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "articles.tsv"
        path.write_bytes(b"A\r\nB\r\n")
        assert list(read_labels(path)) == ["A", "B"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(read_labels(tmp_path / "nope.tsv"))


class TestReadEdges:
    """Test the link file reader."""

    def test_pairs_in_file_order(self, write_data_files):
        _, links = write_data_files(ARTICLES, LINKS)
        assert list(read_edges(links)) == [
            ("A", "B"),
            ("B", "École"),
            ("A", "D_E"),
            ("D_E", "École"),
        ]

    def test_extra_columns_ignored(self, write_data_files):
        _, links = write_data_files(ARTICLES, "A\tB\t0.5\n")
        assert list(read_edges(links)) == [("A", "B")]

    def test_single_field_line(self, write_data_files):
        """A line with only one label is a format error with its line number."""
        _, links = write_data_files(ARTICLES, "# header\nA\tB\nC\n")
        with pytest.raises(DataFormatError) as exc_info:
            list(read_edges(links))
        assert exc_info.value.line_no == 3
        assert exc_info.value.path == links


class TestLoadGraph:
    """Test building a finder straight from files."""

    def test_load_and_query(self, write_data_files):
        articles, links = write_data_files(ARTICLES, LINKS)
        finder = load_graph(articles, links)
        assert finder.shortest_path("A", "École") == ["A", "B", "École"]
        assert finder.shortest_path_via("A", "D_E", "École") == ["A", "D_E", "École"]

    def test_symmetric_option(self, write_data_files):
        articles, links = write_data_files(ARTICLES, LINKS)
        finder = load_graph(articles, links, symmetric=True)
        assert finder.shortest_path_length("École", "A") == 2

    def test_duplicate_article(self, write_data_files):
        articles, links = write_data_files("A\nB\nA\n", "")
        with pytest.raises(DuplicateLabelError):
            load_graph(articles, links)

    def test_link_to_unlisted_article(self, write_data_files):
        articles, links = write_data_files("A\nB\n", "A\tB\nB\tC\n")
        with pytest.raises(UnknownLabelInEdgeError):
            load_graph(articles, links)

    def test_encoded_link_matches_decoded_article(self, write_data_files):
        """Articles and links are decoded the same way before matching."""
        articles, links = write_data_files("C%2B%2B\nJava\n", "Java\tC%2B%2B\n")
        finder = load_graph(articles, links)
        assert finder.shortest_path("Java", "C++") == ["Java", "C++"]

"""Tests for character sources."""

from __future__ import annotations

import io

import pytest

from csvlex.core.lexer import EOF, Lexer, StreamSource, StringSource, TokenKind, create_lexer


def make_string_source(text: str) -> StringSource:
    return StringSource(text)


def make_stream_source(text: str) -> StreamSource:
    return StreamSource(io.StringIO(text, newline=""))


@pytest.fixture(params=[make_string_source, make_stream_source], ids=["string", "stream"])
def make_source(request: pytest.FixtureRequest):
    """Parametrize over both source variants."""
    return request.param


class TestCharacterSource:
    """Contract tests run against every source variant."""

    def test_current_character_does_not_advance(self, make_source) -> None:
        """Test that current_character is side-effect free."""
        source = make_source("ab")
        assert source.current_character() == "a"
        assert source.current_character() == "a"

    def test_advance_returns_new_current(self, make_source) -> None:
        """Test advancing through the input."""
        source = make_source("ab")
        assert source.advance_and_return_next_character() == "b"
        assert source.current_character() == "b"
        assert source.advance_and_return_next_character() == EOF

    def test_advance_past_end_is_idempotent(self, make_source) -> None:
        """Test that EOF repeats once reached."""
        source = make_source("a")
        for _ in range(3):
            assert source.advance_and_return_next_character() == EOF
        assert source.current_character() == EOF

    def test_empty_input(self, make_source) -> None:
        """Test that empty input starts at EOF."""
        assert make_source("").current_character() == EOF

    def test_nul_is_an_ordinary_character(self, make_source) -> None:
        """Test that a NUL character is not mistaken for end of input."""
        source = make_source("\0x")
        assert source.current_character() == "\0"
        assert source.advance_and_return_next_character() == "x"

    @pytest.mark.parametrize("delimiter", [",", "\r", "\n"])
    def test_read_unquoted_cell_stops_at_delimiter(self, make_source, delimiter: str) -> None:
        """Test that the delimiter is left under the cursor."""
        source = make_source(f"abc{delimiter}def")
        assert source.read_unquoted_cell() == "abc"
        assert source.current_character() == delimiter

    def test_read_unquoted_cell_at_delimiter(self, make_source) -> None:
        """Test an empty unquoted scan when the cursor is on a comma."""
        source = make_source(",x")
        assert source.read_unquoted_cell() == ""
        assert source.current_character() == ","

    def test_read_unquoted_cell_to_end(self, make_source) -> None:
        """Test an unquoted cell running to EOF."""
        source = make_source("tail")
        assert source.read_unquoted_cell() == "tail"
        assert source.current_character() == EOF

    def test_rewind(self, make_source) -> None:
        """Test that rewind restores the initial state."""
        source = make_source("xyz")
        source.read_unquoted_cell()
        source.rewind()
        assert source.current_character() == "x"
        assert source.read_unquoted_cell() == "xyz"


class TestStreamSource:
    """Tests specific to StreamSource."""

    def test_rewind_to_starting_offset(self) -> None:
        """Test that a seekable stream rewinds to where it started."""
        stream = io.StringIO("skip me\na,b", newline="")
        stream.readline()
        lexer = Lexer.from_stream(stream)
        assert lexer.next_token().value == "a"
        lexer.rewind()
        assert lexer.next_token().value == "a"

    def test_non_seekable_stream_replays(self, pipe_stream) -> None:
        """Test that a non-seekable stream is replayed from its buffer."""
        lexer = Lexer.from_stream(pipe_stream('"x\ny",z\nw'))
        first = list(lexer)

        lexer.rewind()
        assert list(lexer) == first

    def test_replay_continues_from_stream(self, pipe_stream) -> None:
        """Test a rewind before the stream was fully read."""
        source = StreamSource(pipe_stream("abc"))
        assert source.current_character() == "a"
        source.rewind()
        assert source.read_unquoted_cell() == "abc"
        assert source.current_character() == EOF

    def test_reads_lazily(self, pipe_stream) -> None:
        """Test that only one character of look-ahead is held."""
        stream = pipe_stream("a,b,c")
        lexer = Lexer.from_stream(stream)
        assert stream.reads == 1
        lexer.next_token()
        # 'a', ',' and the look-ahead 'b'
        assert stream.reads == 3


class TestCreateLexer:
    """Tests for create_lexer dispatch."""

    def test_from_string(self) -> None:
        """Test creating a lexer from text."""
        assert create_lexer("x").next_token().value == "x"

    def test_from_stream(self) -> None:
        """Test creating a lexer from a text stream."""
        lexer = create_lexer(io.StringIO("x,y"))
        assert [t.value for t in lexer if t.kind is TokenKind.CELL] == ["x", "y"]

"""Unit tests for Needleman-Wunsch token alignment."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textdelta.align import AlignOp, Token, align_tokens, tokenize


def _ops(aligned):
    return [item.op for item in aligned]


def _tokens(*texts):
    return [Token(text, 0, len(text)) for text in texts]


@pytest.mark.unit
class TestAlignTokens:
    """Test align_tokens() results."""

    def test_both_empty(self):
        """Test two empty sequences are identical."""
        alignment = align_tokens([], [])
        assert alignment.old == []
        assert alignment.new == []
        assert alignment.distance == 0.0

    def test_old_empty(self):
        """Test an empty old side makes every new token an insert."""
        alignment = align_tokens([], tokenize("a b"))
        assert alignment.old == []
        assert _ops(alignment.new) == [AlignOp.INSERT] * 3
        assert alignment.distance == 1.0

    def test_new_empty(self):
        """Test an empty new side makes every old token a delete."""
        alignment = align_tokens(tokenize("a b"), [])
        assert _ops(alignment.old) == [AlignOp.DELETE] * 3
        assert alignment.new == []
        assert alignment.distance == 1.0

    def test_identical(self):
        """Test identical sequences align as all matches."""
        tokens = tokenize("foo bar")
        alignment = align_tokens(tokens, tokenize("foo bar"))
        assert _ops(alignment.old) == [AlignOp.MATCH] * 3
        assert _ops(alignment.new) == [AlignOp.MATCH] * 3
        assert alignment.distance == 0.0

    def test_single_token_change(self):
        """Test only the changed number is marked."""
        alignment = align_tokens(tokenize('"age": 30,'), tokenize('"age": 31,'))
        assert alignment.distance < 0.3
        changed_old = [t.token.text for t in alignment.old if t.op is AlignOp.DELETE]
        changed_new = [t.token.text for t in alignment.new if t.op is AlignOp.INSERT]
        assert changed_old == ["30"]
        assert changed_new == ["31"]

    def test_completely_different_words(self):
        """Test different words sharing only spaces have a high distance."""
        alignment = align_tokens(tokenize("foo bar baz"), tokenize("xxx yyy zzz"))
        assert alignment.distance >= 0.3

    def test_normalized_distance(self):
        """Test one match plus one substitution gives 0.5."""
        alignment = align_tokens(_tokens("a", "b"), _tokens("a", "c"))
        assert alignment.distance == pytest.approx(0.5)

    def test_no_common_tokens(self):
        """Test sequences without any match have distance 1."""
        alignment = align_tokens(_tokens("a", "b"), _tokens("c"))
        assert alignment.distance == pytest.approx(1.0)

    def test_repeated_run_marks_later_position(self):
        """Test an extra token in a run of identical tokens is attributed to the end."""
        alignment = align_tokens(_tokens("^", "^", "^"), _tokens("^", "^", "^", "^"))
        assert _ops(alignment.old) == [AlignOp.MATCH] * 3
        assert _ops(alignment.new) == [AlignOp.MATCH, AlignOp.MATCH, AlignOp.MATCH, AlignOp.INSERT]

    def test_removed_token_in_run_marks_later_position(self):
        """Test a missing token in a run is attributed to the end."""
        alignment = align_tokens(_tokens("x", "x", "y"), _tokens("x", "y"))
        assert _ops(alignment.old) == [AlignOp.MATCH, AlignOp.DELETE, AlignOp.MATCH]


token_lists = st.lists(st.sampled_from(["a", "b", "c", " ", "^"]), max_size=15).map(lambda t: _tokens(*t))


@pytest.mark.unit
@pytest.mark.fuzzing
class TestAlignTokensProperties:
    """Property-based tests for alignment."""

    @given(token_lists, token_lists)
    def test_every_token_accounted_for(self, old, new):
        """Property: each side lists every input token once, in order."""
        alignment = align_tokens(old, new)
        assert [item.token for item in alignment.old] == old
        assert [item.token for item in alignment.new] == new

    @given(token_lists, token_lists)
    def test_ops_per_side(self, old, new):
        """Property: old tokens are MATCH/DELETE and new tokens MATCH/INSERT."""
        alignment = align_tokens(old, new)
        assert all(item.op in (AlignOp.MATCH, AlignOp.DELETE) for item in alignment.old)
        assert all(item.op in (AlignOp.MATCH, AlignOp.INSERT) for item in alignment.new)

    @given(token_lists, token_lists)
    def test_matches_pair_equal_texts(self, old, new):
        """Property: matched tokens line up one-to-one with equal text."""
        alignment = align_tokens(old, new)
        old_matches = [item.token.text for item in alignment.old if item.op is AlignOp.MATCH]
        new_matches = [item.token.text for item in alignment.new if item.op is AlignOp.MATCH]
        assert old_matches == new_matches

    @given(token_lists, token_lists)
    def test_distance_bounds(self, old, new):
        """Property: distance is in [0, 1] and 0 exactly for equal sequences."""
        alignment = align_tokens(old, new)
        assert 0.0 <= alignment.distance <= 1.0
        same = [t.text for t in old] == [t.text for t in new]
        assert (alignment.distance == 0.0) == same

    @given(token_lists.filter(bool))
    def test_one_side_empty_distance_is_one(self, tokens):
        """Property: aligning against nothing has distance 1."""
        assert align_tokens(tokens, []).distance == 1.0
        assert align_tokens([], tokens).distance == 1.0

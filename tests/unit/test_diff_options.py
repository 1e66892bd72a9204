"""Unit tests for DiffOptions validation."""

import dataclasses

import pytest

from textdelta.exceptions import ValidationError
from textdelta.options import DiffOptions


@pytest.mark.unit
class TestDiffOptions:
    """Test DiffOptions defaults and validation."""

    def test_defaults(self):
        """Test default field values."""
        options = DiffOptions()
        assert options.context_lines == 3
        assert options.layout == "inline"
        assert options.color is None
        assert options.width == 0

    def test_frozen(self):
        """Test options cannot be mutated."""
        options = DiffOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.layout = "side-by-side"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "value,expected", [(-1, 0), (-500, 0), (0, 0), (7, 7), (100_000, 100_000), (10**9, 100_000)]
    )
    def test_context_lines_clamped(self, value, expected):
        """Test out-of-range context sizes are clamped."""
        assert DiffOptions(context_lines=value).context_lines == expected

    @pytest.mark.parametrize("value", ["3", 2.5, True, None])
    def test_context_lines_type(self, value):
        """Test non-integer context sizes are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            DiffOptions(context_lines=value)
        assert exc_info.value.parameter_name == "context_lines"

    @pytest.mark.parametrize("layout", ["inline", "side-by-side", "prefer-side-by-side"])
    def test_valid_layouts(self, layout):
        """Test every supported layout is accepted."""
        assert DiffOptions(layout=layout).layout == layout

    def test_invalid_layout(self):
        """Test unknown layouts are rejected with a helpful message."""
        with pytest.raises(ValidationError, match="layout must be one of"):
            DiffOptions(layout="sideways")  # type: ignore[arg-type]

    @pytest.mark.parametrize("color", [None, True, False])
    def test_valid_color(self, color):
        """Test tri-state color values."""
        assert DiffOptions(color=color).color is color

    def test_invalid_color(self):
        """Test non-boolean color values are rejected."""
        with pytest.raises(ValidationError):
            DiffOptions(color="always")  # type: ignore[arg-type]

    def test_negative_width(self):
        """Test negative widths are rejected."""
        with pytest.raises(ValidationError, match="width must be non-negative"):
            DiffOptions(width=-1)

    def test_width_type(self):
        """Test non-integer widths are rejected."""
        with pytest.raises(ValidationError):
            DiffOptions(width="80")  # type: ignore[arg-type]


@pytest.mark.unit
class TestCreateUpdated:
    """Test CloneFrozenMixin.create_updated()."""

    def test_returns_new_instance(self):
        """Test the original options are unchanged."""
        original = DiffOptions(context_lines=1)
        updated = original.create_updated(layout="side-by-side", width=120)
        assert original.layout == "inline"
        assert updated.layout == "side-by-side"
        assert updated.width == 120
        assert updated.context_lines == 1

    def test_revalidates(self):
        """Test updated values go through validation again."""
        with pytest.raises(ValidationError):
            DiffOptions().create_updated(width=-5)

    def test_clamps_on_update(self):
        """Test clamping also applies to updated copies."""
        assert DiffOptions().create_updated(context_lines=-3).context_lines == 0

    def test_field_metadata(self):
        """Test every field documents itself."""
        for field in dataclasses.fields(DiffOptions):
            assert field.metadata.get("help")

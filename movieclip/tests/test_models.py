"""Tests for frame references and argument coercion."""

import pytest

from movieclip.models import FrameIndex, FrameLabel, InvalidArgument, as_frame_ref


class TestAsFrameRef:
    def test_int_becomes_index(self):
        assert as_frame_ref(4) == FrameIndex(4)

    def test_negative_int_kept_for_clamping(self):
        assert as_frame_ref(-3) == FrameIndex(-3)

    def test_str_becomes_label(self):
        assert as_frame_ref("intro") == FrameLabel("intro")

    def test_empty_str_is_a_label(self):
        assert as_frame_ref("") == FrameLabel("")

    def test_refs_pass_through(self):
        index = FrameIndex(2)
        label = FrameLabel("outro")
        assert as_frame_ref(index) is index
        assert as_frame_ref(label) is label

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_rejected(self, value):
        with pytest.raises(InvalidArgument, match="bool"):
            as_frame_ref(value)

    @pytest.mark.parametrize("value", [None, 2.0, b"intro", (1,), {}])
    def test_other_types_rejected(self, value):
        with pytest.raises(InvalidArgument):
            as_frame_ref(value)


class TestFrameRefs:
    def test_frozen(self):
        ref = FrameIndex(1)
        with pytest.raises(AttributeError):
            ref.index = 2

    def test_hashable(self):
        assert len({FrameLabel("a"), FrameLabel("a"), FrameIndex(1)}) == 2

    def test_index_and_label_never_equal(self):
        assert FrameIndex(0) != FrameLabel("0")

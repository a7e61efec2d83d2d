"""Tests for the fzf picker wrapper, with iterfzf stubbed out."""

import pytest

from pair import picker
from pair.coauthors import CoAuthor, selection_label
from pair.picker import PickerError, SelectionCancelled, pick

JANE = CoAuthor(name="Jane Doe", email="jane@x.com", alias="jane")
JOHN = CoAuthor(name="John Doe", email="john@x.com", alias="john")


@pytest.fixture
def fzf(monkeypatch):
    """Install a fake iterfzf returning `result`; records what it was given."""
    seen = {}

    def _install(result):
        def _iterfzf(items, multi=False, prompt="> ", **kwargs):
            seen.update(items=list(items), multi=multi, prompt=prompt)
            if isinstance(result, BaseException):
                raise result
            return result
        monkeypatch.setattr(picker, "iterfzf", _iterfzf)
        return seen
    return _install


class TestPick:

    def test_single(self, fzf):
        seen = fzf(["John Doe (john) <john@x.com>"])
        assert pick([JANE, JOHN], selection_label, "Select co-author:") == [JOHN]
        assert seen["items"] == ["Jane Doe (jane) <jane@x.com>", "John Doe (john) <john@x.com>"]
        assert seen["multi"] is True

    def test_single_keeps_first_mark(self, fzf):
        fzf(["John Doe (john) <john@x.com>", "Jane Doe (jane) <jane@x.com>"])
        assert pick([JANE, JOHN], selection_label, "Select co-author:") == [JOHN]

    def test_multi_keeps_chosen_order(self, fzf):
        fzf(["John Doe (john) <john@x.com>", "Jane Doe (jane) <jane@x.com>"])
        assert pick([JANE, JOHN], selection_label, "Select:", multi=True) == [JOHN, JANE]

    def test_zero_selected_is_not_cancel(self, fzf):
        fzf([])
        assert pick([JANE, JOHN], selection_label, "Select:", multi=True) == []

    def test_single_no_match_is_not_cancel(self, fzf):
        fzf([])
        assert pick([JANE], selection_label, "Select co-author:") == []

    def test_fzf_failure_is_not_cancel(self, fzf):
        fzf(None)
        with pytest.raises(PickerError):
            pick([JANE], selection_label, "Select:")

    def test_ctrl_c(self, fzf):
        fzf(KeyboardInterrupt())
        with pytest.raises(SelectionCancelled):
            pick([JANE], selection_label, "Select:")

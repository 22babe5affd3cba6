# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import pytest

from lar.coreobj.summary import POTSummary


@pytest.fixture
def summary() -> POTSummary:
    return POTSummary(totpot=1.5e12, totgoodpot=1.0e12, totspills=10, goodspills=7)


def test_defaults_are_zero():
    empty = POTSummary()
    assert (empty.totpot, empty.totgoodpot) == (0.0, 0.0)
    assert (empty.totspills, empty.goodspills) == (0, 0)


def test_aggregate_adds_in_place(summary):
    result = summary.aggregate(POTSummary(2.0e12, 1.0e12, 5, 5))
    assert result is summary
    assert summary == POTSummary(3.5e12, 2.0e12, 15, 12)


def test_zero_is_identity(summary):
    assert summary + POTSummary() == summary
    assert POTSummary() + summary == summary


def test_add_does_not_modify_operands(summary):
    other = POTSummary(1.0, 1.0, 1, 1)
    total = summary + other
    assert total == POTSummary(1.5e12 + 1.0, 1.0e12 + 1.0, 11, 8)
    assert summary.totspills == 10
    assert other.totspills == 1


def test_sum_of_summaries(summary):
    total = sum([summary, summary, summary], POTSummary())
    assert total.totspills == 30
    assert total.totpot == pytest.approx(4.5e12)


def test_str(summary):
    text = str(summary)
    assert "10 total spills" in text
    assert "7 good spills" in text
    assert "1500000000000.0 POT" in text

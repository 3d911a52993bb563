from statsdclient.sampling import annotate

import pytest


@pytest.mark.parametrize("sample_rate", [1, 1.0, 2])
def test_annotate_identity(sample_rate) -> None:
    assert annotate(["foo:1|c", "bar:2|ms"], sample_rate) == ["foo:1|c", "bar:2|ms"]


def test_annotate_appends_rate() -> None:
    assert annotate(["foo:1|c", "bar:2|ms"], 0.5) == ["foo:1|c|@0.5", "bar:2|ms|@0.5"]


def test_annotate_does_not_validate_rate() -> None:
    assert annotate(["foo:1|c"], 0) == ["foo:1|c|@0"]
    assert annotate(["foo:1|c"], -0.25) == ["foo:1|c|@-0.25"]


def test_annotate_empty() -> None:
    assert annotate([], 0.1) == []

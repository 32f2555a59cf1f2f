import pytest

from propensity.matrix_csv import from_csv


def _write(tmp_path, text):
    path = tmp_path / "data.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_without_headers(tmp_path):
    path = _write(tmp_path, "1,2,3\n0,4,5\n")
    values, records = from_csv(path, False)
    assert values == [1.0, 2.0, 3.0, 1.0, 0.0, 4.0, 5.0, 1.0]
    assert records == 2


def test_reads_with_headers(tmp_path):
    path = _write(tmp_path, "y,a\n1,2\n0,3\n")
    values, records = from_csv(path, True)
    assert values == [1.0, 2.0, 1.0, 0.0, 3.0, 1.0]
    assert records == 2


def test_every_record_ends_with_intercept(tmp_path):
    path = _write(tmp_path, "1,2.5\n0,-1e2\n1,7\n")
    values, records = from_csv(path, False)
    width = len(values) // records
    assert all(values[i * width + width - 1] == 1.0 for i in range(records))
    assert values[3] == -1e2


def test_blank_lines_are_skipped(tmp_path):
    path = _write(tmp_path, "1,2\n\n0,3\n")
    values, records = from_csv(path, False)
    assert records == 2
    assert values == [1.0, 2.0, 1.0, 0.0, 3.0, 1.0]


def test_unequal_lengths_raise(tmp_path):
    path = _write(tmp_path, "1,2\n0,3,4\n")
    with pytest.raises(ValueError):
        from_csv(path, False)


@pytest.mark.parametrize("bad", ["abc", " 1", "1_0", ""])
def test_invalid_number_raises(tmp_path, bad):
    path = _write(tmp_path, f"1,{bad}\n")
    with pytest.raises(ValueError):
        from_csv(path, False)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        from_csv(tmp_path / "absent.csv", False)
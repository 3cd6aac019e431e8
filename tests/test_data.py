import logging

import pytest

from kredi_onay.data import (
    Application,
    apply_normalization,
    class_distribution_summary,
    normalize_features,
    owner_to_int,
    read_applications,
)

HEADER = "id,yas,gelir,krediSkoru,evSahibi,calismaSuresi,krediOnayi\n"


def _write(tmp_path, body):
    path = tmp_path / "data.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_read_applications_parses_rows(tmp_path):
    path = _write(tmp_path, "1,30,5000,700,E,5,1\n2,45,3000,550,H,10,0\n")
    apps = read_applications(path)
    assert apps == [
        Application(1, 30, 5000, 700, "E", 5, 1),
        Application(2, 45, 3000, 550, "H", 10, 0),
    ]


def test_read_applications_empty_owner_defaults(tmp_path):
    path = _write(tmp_path, "3,25,4000,600,,2,0\n")
    [app] = read_applications(path)
    assert app.home_owner == "H"


def test_read_applications_lenient_integers(tmp_path):
    path = _write(tmp_path, "4, 7,12abc,650,e,3,1\r\n")
    [app] = read_applications(path)
    assert (app.age, app.income, app.approved) == (7, 12, 1)
    assert app.home_owner == "e"


def test_read_applications_skips_bad_lines(tmp_path, caplog):
    path = _write(
        tmp_path,
        "x,30,5000,700,E,5,1\n\n5,40,99999999999,700,E,5,1\n6,50,6000,800,E,8,1\n7,1,2\n",
    )
    with caplog.at_level(logging.WARNING):
        apps = read_applications(path)
    assert [app.id for app in apps] == [6]
    assert sum("Hatali satir" in rec.getMessage() for rec in caplog.records) == 4


def test_read_applications_header_only(tmp_path):
    path = _write(tmp_path, "")
    assert read_applications(path) == []


def test_read_applications_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_applications(tmp_path / "absent.csv")


@pytest.mark.parametrize(
    "flag, expected", [("E", 1), ("e", 1), ("H", 0), ("h", 0), ("x", 0), ("", 0)]
)
def test_owner_to_int(flag, expected):
    assert owner_to_int(flag) == expected


def test_features_vector():
    app = Application(9, 33, 4200, 710, "E", 6, 1)
    assert app.features() == [33.0, 4200.0, 710.0, 1.0, 6.0]


def test_normalize_features_bounds_and_extremes():
    rows = [[1.0, 10.0, 3.0], [5.0, 20.0, 3.0], [3.0, 15.0, 3.0]]
    scaled, mins, maxs = normalize_features(rows)
    assert mins == [1.0, 10.0, 3.0]
    assert maxs == [5.0, 20.0, 3.0]
    for row in scaled:
        assert all(0.0 <= value <= 1.0 for value in row)
    assert scaled[0][0] == 0.0
    assert scaled[1][1] == 1
    assert [row[2] for row in scaled] == [0.5, 0.5, 0.5]


def test_normalize_features_does_not_mutate_input():
    rows = [[1.0, 2.0], [3.0, 4.0]]
    normalize_features(rows)
    assert rows == [[1.0, 2.0], [3.0, 4.0]]


def test_normalize_features_empty():
    assert normalize_features([]) == ([], [], [])


def test_apply_normalization_matches_training_scaling():
    rows = [[2.0, 8.0], [6.0, 4.0], [4.0, 6.0]]
    scaled, mins, maxs = normalize_features(rows)
    assert apply_normalization(rows, mins, maxs) == scaled


def test_apply_normalization_constant_training_column():
    result = apply_normalization([[7.0], [100.0]], [3.0], [3.0])
    assert result == [[0.5], [0.5]]


def test_apply_normalization_without_bounds_returns_copy():
    rows = [[1.0, 2.0]]
    result = apply_normalization(rows, [], [])
    assert result == rows
    result[0][0] = 9.0
    assert rows[0][0] == 1.0


def test_class_distribution_summary_counts():
    text = class_distribution_summary([1, 0, 1, 1])
    assert text.startswith("Sınıf Dağılımı: 3 pozitif, 1 negatif (")
    assert text.endswith("75.0%)")


def test_class_distribution_summary_empty():
    assert "nan" in class_distribution_summary([])
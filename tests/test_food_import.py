"""Tests for spreadsheet food parsing."""

from calorie_tracker.services.food_import import parse_food_csv, parse_food_rows


def test_parse_food_csv_reads_rows_after_header() -> None:
    text = (
        "Name,Calories,Protein,Fats,Carbs\n"
        "Rice,130,2.7,0.3,28\n"
        "Chicken breast,165,31,3.6,0\n"
    )

    rows = parse_food_csv(text)

    assert [row.name for row in rows] == ["Rice", "Chicken breast"]
    assert [row.row_index for row in rows] == [2, 3]
    assert rows[0].calories_per_100g == 130
    assert rows[0].protein_per_100g == 2.7
    assert rows[0].fats_per_100g == 0.3
    assert rows[0].carbs_per_100g == 28
    assert all(row.is_valid for row in rows)


def test_parse_food_csv_accepts_semicolons_and_decimal_commas() -> None:
    text = (
        "Name;Calories;Protein;Fats;Carbs\n"
        "Avena;389;16,9;6,9;66,3\n"
        "Pan;265;9;3,2;49\n"
    )

    rows = parse_food_csv(text)

    assert rows[0].name == "Avena"
    assert rows[0].protein_per_100g == 16.9
    assert rows[0].carbs_per_100g == 66.3
    assert rows[1].is_valid


def test_parse_food_rows_reports_errors() -> None:
    rows = parse_food_rows(
        [
            ["", 100, 1, 1, 1],
            ["Butter", "lots", 1, 81, 0],
            ["Oil", 884, -1, 100],
        ]
    )

    assert rows[0].errors == ("Name is required",)
    assert rows[1].errors == ("Invalid calories",)
    assert rows[1].calories_per_100g == 0.0
    assert rows[2].errors == ("Invalid protein", "Invalid carbs")
    assert not any(row.is_valid for row in rows)


def test_parse_food_rows_skips_blank_rows_before_numbering() -> None:
    rows = parse_food_rows(
        [
            ["Rice", 130, 2.7, 0.3, 28],
            ["", " ", None],
            ["Beans", 127, 8.7, 0.5, 22.8],
        ]
    )

    assert [row.row_index for row in rows] == [2, 3]
    assert rows[1].name == "Beans"


def test_parse_food_rows_rejects_booleans_and_infinity() -> None:
    rows = parse_food_rows([["Water", True, "inf", 0, 0]])

    assert rows[0].errors == ("Invalid calories", "Invalid protein")


def test_parse_empty_csv() -> None:
    assert parse_food_csv("") == []

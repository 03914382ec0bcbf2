"""
Tests for the convert() entry point.

Every scenario runs in both invocation modes: direct (return or raise) and
callback (callback(error) or callback(None, csv)).
"""
from unittest.mock import Mock

import pytest
from json2csv import ConversionOptions, ConversionResult, OptionsError, ValidationError, convert, run_conversion

MISMATCH = "fieldNames and fields should be of the same length, if fieldNames is provided."


def convert_both_ways(params):
    """Run params through both modes, asserting they agree, and return the csv."""
    callback = Mock()
    assert convert(params, callback) is None
    callback.assert_called_once()

    direct = convert(params)
    assert callback.call_args.args == (None, direct)
    return direct


class TestScenarios:
    """End-to-end conversions over the car fixtures."""

    def test_parse_json_to_csv(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price", "color"]}

        assert convert_both_ways(params) == csv_fixtures["default"]

    def test_without_fields(self, cars, csv_fixtures):
        assert convert_both_ways({"data": cars}) == csv_fixtures["default"]

    def test_without_column_title(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price", "color"], "hasCSVColumnTitle": False}

        assert convert_both_ways(params) == csv_fixtures["withoutTitle"]

    @pytest.mark.parametrize("data", [{}, [None]])
    def test_only_column_title(self, data):
        params = {"data": data, "fields": ["carModel", "price", "color"]}

        assert convert_both_ways(params) == '"carModel","price","color"'

    def test_selected_fields(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price"]}

        assert convert_both_ways(params) == csv_fixtures["selected"]

    def test_not_exist_field_empty(self, cars, csv_fixtures):
        params = {
            "data": cars,
            "fields": ["first not exist field", "carModel", "price", "not exist field", "color"],
        }

        assert convert_both_ways(params) == csv_fixtures["withNotExistField"]

    def test_reversed_order(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["price", "carModel"]}

        assert convert_both_ways(params) == csv_fixtures["reversed"]

    def test_output_is_string(self, cars):
        assert isinstance(convert_both_ways({"data": cars, "fields": ["carModel"]}), str)

    def test_escape_quotes(self, json_fixtures, csv_fixtures):
        params = {"data": json_fixtures["quotes"], "fields": ["a string"]}

        assert convert_both_ways(params) == csv_fixtures["quotes"]

    def test_custom_quotes(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price"], "quotes": "'"}

        assert convert_both_ways(params) == csv_fixtures["withSimpleQuotes"]

    def test_without_quotes(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price"], "quotes": ""}

        assert convert_both_ways(params) == csv_fixtures["withoutQuotes"]

    def test_custom_delimiter(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price", "color"], "del": "\t"}

        assert convert_both_ways(params) == csv_fixtures["tsv"]

    def test_custom_eol(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price", "color"], "eol": ";"}

        assert convert_both_ways(params) == csv_fixtures["eol"]

    def test_custom_new_line(self, cars, csv_fixtures):
        params = {"data": cars, "fields": ["carModel", "price", "color"], "newLine": "\r\n"}

        assert convert_both_ways(params) == csv_fixtures["newLine"]

    def test_new_line_wins_over_eol(self, cars, csv_fixtures):
        params = {
            "data": cars,
            "fields": ["carModel", "price", "color"],
            "eol": ";",
            "newLine": "\r\n",
        }

        assert convert_both_ways(params) == csv_fixtures["newLine"]

    def test_field_names(self, cars, csv_fixtures):
        params = {
            "data": cars,
            "fields": ["carModel", "price"],
            "fieldNames": ["Car Model", "Price USD"],
        }

        assert convert_both_ways(params) == csv_fixtures["fieldNames"]

    def test_nested(self, json_fixtures, csv_fixtures):
        params = {
            "data": json_fixtures["nested"],
            "fields": ["car.make", "car.model", "price", "color", "car.ye.ar"],
            "fieldNames": ["Make", "Model", "Price", "Color", "Year"],
            "nested": True,
        }

        assert convert_both_ways(params) == csv_fixtures["nested"]

    def test_none_default_value_is_empty_cell(self):
        params = {"data": [{"a": 1}], "fields": ["a", "b"], "defaultValue": None}

        assert convert_both_ways(params) == '"a","b"\n"1",""'

    def test_nested_off_treats_path_literally(self):
        params = {"data": [{"car": {"make": "X"}}], "fields": ["car.make"], "defaultValue": "D"}

        assert convert_both_ways(params) == '"car.make"\n"D"'

    def test_default_value(self, json_fixtures, csv_fixtures):
        params = {
            "data": json_fixtures["defaultValue"],
            "fields": ["carModel", "price"],
            "defaultValue": "NULL",
        }

        assert convert_both_ways(params) == csv_fixtures["defaultValue"]

    def test_none_options_use_defaults(self, cars, csv_fixtures):
        params = {"data": cars, "quotes": None, "del": None, "hasCSVColumnTitle": None}

        assert convert_both_ways(params) == csv_fixtures["default"]

    def test_idempotent(self, cars):
        params = {"data": cars, "fields": ["price", "color"], "del": ";"}

        assert convert(params) == convert(params)


class TestErrors:
    """Error reporting in both modes."""

    def test_field_names_mismatch(self, cars):
        # "field" is not an option: fields are derived (3) against 2 names
        params = {"data": cars, "field": ["carModel"], "fieldNames": ["test", "blah"]}

        callback = Mock()
        convert(params, callback)
        error = callback.call_args.args[0]
        assert len(callback.call_args.args) == 1
        assert isinstance(error, ValidationError)
        assert str(error) == MISMATCH

        with pytest.raises(ValidationError) as exc_info:
            convert(params)
        assert str(exc_info.value) == MISMATCH

    @pytest.mark.parametrize(
        "fields,field_names",
        [(["a"], []), (["a", "b"], ["A"]), ([], ["A"])],
    )
    def test_mismatch_lengths(self, fields, field_names):
        params = {"data": [{"a": 1, "b": 2}], "fields": fields, "fieldNames": field_names}

        with pytest.raises(ValidationError, match="same length"):
            convert(params)

    def test_malformed_options_both_modes(self, cars):
        params = {"data": cars, "del": 5}

        callback = Mock()
        convert(params, callback)
        assert isinstance(callback.call_args.args[0], OptionsError)

        with pytest.raises(OptionsError):
            convert(params)

    def test_callback_exception_propagates_once(self, cars):
        callback = Mock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            convert({"data": cars}, callback)
        callback.assert_called_once()

    def test_callback_fires_before_return(self, cars):
        seen = []
        result = convert({"data": cars, "fields": ["carModel"]}, lambda err, csv=None: seen.append((err, csv)))

        assert result is None
        assert len(seen) == 1
        assert seen[0][0] is None
        assert seen[0][1].startswith('"carModel"')


class TestCallingConventions:
    """Options passed as mapping, model, or keywords."""

    def test_keyword_options(self, cars, csv_fixtures):
        assert convert(data=cars, fields=["carModel", "price"]) == csv_fixtures["selected"]

    def test_keyword_alias_options(self, cars, csv_fixtures):
        csv_text = convert(data=cars, fields=["carModel", "price", "color"], newLine="\r\n")

        assert csv_text == csv_fixtures["newLine"]

    def test_model_options(self, cars, csv_fixtures):
        options = ConversionOptions.parse({"data": cars, "quotes": ""})

        assert convert(options, fields=["carModel", "price"]) == csv_fixtures["withoutQuotes"]

    def test_run_conversion_success(self, cars, csv_fixtures):
        result = run_conversion({"data": cars})

        assert isinstance(result, ConversionResult)
        assert result.ok
        assert result.error is None
        assert result.unwrap() == csv_fixtures["default"]

    def test_run_conversion_failure(self, cars):
        result = run_conversion({"data": cars, "fieldNames": ["only one"]})

        assert not result.ok
        assert result.csv is None
        assert isinstance(result.error, ValidationError)
        with pytest.raises(ValidationError):
            result.unwrap()

from fedex_tracking_report.api.schema import (
    ParseFailure,
    ParseOk,
    parse_track_result,
    parse_tracking_response,
)


def test_parse_track_result_ok_typed_record(track_result):
    res = parse_track_result(track_result("111"))
    assert isinstance(res, ParseOk)
    rec = res.value
    assert rec.tracking_number == "111"
    assert rec.first_result.latest_status_detail.status_by_locale == "Delivered"


def test_parse_track_result_ignores_unknown_keys_and_optional_groups():
    res = parse_track_result({
        "trackingNumber": "222",
        "trackResults": [{"somethingNew": {"x": 1}}],
    })
    assert isinstance(res, ParseOk)
    tr = res.value.first_result
    assert tr.latest_status_detail is None
    assert tr.package_details is None
    assert tr.date_and_times is None


def test_parse_track_result_reports_offending_path(track_result):
    bad = track_result("333")
    del bad["trackResults"][0]["latestStatusDetail"]["statusByLocale"]

    res = parse_track_result(bad)
    assert isinstance(res, ParseFailure)
    paths = [i.path for i in res.issues]
    assert "trackResults.0.latestStatusDetail.statusByLocale" in paths


def test_parse_track_result_missing_tracking_number():
    res = parse_track_result({"trackResults": []})
    assert isinstance(res, ParseFailure)
    assert res.issues[0].path == "trackingNumber"


def test_parse_tracking_response_envelope_errors():
    assert isinstance(parse_tracking_response([]), ParseFailure)
    res = parse_tracking_response({"output": {}})
    assert isinstance(res, ParseFailure)
    assert res.issues[0].path == "output.completeTrackResults"


def test_parse_tracking_response_prefixes_element_index(track_result, tracking_body):
    good = track_result("1")
    bad = {"trackingNumber": "2"}  # no trackResults
    res = parse_tracking_response(tracking_body(good, bad))
    assert isinstance(res, ParseFailure)
    assert res.issues[0].path == "output.completeTrackResults.1.trackResults"


def test_parse_tracking_response_ok_preserves_order(track_result, tracking_body):
    res = parse_tracking_response(tracking_body(track_result("b"), track_result("a")))
    assert isinstance(res, ParseOk)
    assert [r.tracking_number for r in res.value] == ["b", "a"]


def test_weight_value_number_coerced_to_text(track_result):
    payload = track_result("9", weight={"value": 2.5, "unit": "LB"})
    res = parse_track_result(payload)
    assert isinstance(res, ParseOk)
    w = res.value.first_result.package_details.weight_and_dimensions.weight[0]
    assert w.value == "2.5" and w.unit == "LB"

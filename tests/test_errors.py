import json

from liquidity.errors import ApiError, ErrorPayload, LiquidityError, ValidationIssue


def test_error_payload_parses_wire_shape():
    raw = {
        "message": "Bad request",
        "validationError": [
            {"code": "too_small", "path": ["amount"], "message": "Must be positive"},
            {"code": "custom", "path": [], "message": "Unknown card"},
        ],
    }
    payload = ErrorPayload.model_validate(raw)
    assert payload.message == "Bad request"
    assert [v.code for v in payload.validation_error] == ["too_small", "custom"]
    assert payload.validation_error[0].expected is None
    assert payload.validation_error[1].path == []


def test_error_payload_without_validation_list():
    payload = ErrorPayload.model_validate_json('{"message": "Unauthorized"}')
    assert payload.validation_error == []


def test_api_error_renders_message_and_issues():
    err = ApiError(
        422,
        "Invalid input",
        [ValidationIssue(code="invalid_type", expected="number", received="string", path=["amount"], message="Expected number")],
    )
    text = str(err)
    prefix, _, rest = text.partition(": ")
    assert prefix == "Invalid input"
    assert json.loads(rest) == [
        {
            "code": "invalid_type",
            "expected": "number",
            "received": "string",
            "path": ["amount"],
            "message": "Expected number",
        }
    ]
    assert isinstance(err, LiquidityError)


def test_api_error_with_no_issues_still_renders():
    assert str(ApiError(401, "Unauthorized")) == "Unauthorized: []"


def test_numeric_path_segments_are_kept():
    issue = ValidationIssue.model_validate(
        {"code": "invalid_string", "path": ["floatCurrencies", 1], "message": "Invalid"}
    )
    assert issue.path == ["floatCurrencies", 1]


def test_null_fields_decode_as_empty():
    payload = ErrorPayload.model_validate_json('{"message": "Forbidden", "validationError": null}')
    assert payload.validation_error == []

    issue = ValidationIssue.model_validate({"path": None, "message": "Required"})
    assert issue.code == ""
    assert issue.path == []

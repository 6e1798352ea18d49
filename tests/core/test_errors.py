from catgql.core.errors import (
    CatalogError,
    ErrorKind,
    MalformedRequest,
    RouteNotFound,
    UnknownOperation,
    classify_exception,
)


def test_malformed_request_maps_to_400():
    err = MalformedRequest("Request body is required")
    assert isinstance(err, CatalogError)
    assert err.http_status == 400
    assert err.kind == ErrorKind.MALFORMED_REQUEST
    assert str(err) == "Request body is required"


def test_unknown_operation_carries_name():
    err = UnknownOperation("deleteCat")
    assert err.http_status == 400
    assert err.operation_name == "deleteCat"
    assert err.message == "Unknown operation: deleteCat"


def test_error_info_from_catalog_error():
    info = classify_exception(UnknownOperation("deleteCat"))
    assert info.to_dict() == {
        "kind": "unknown_operation",
        "code": "UNKNOWN_OPERATION",
        "message": "Unknown operation: deleteCat",
        "http_status": 400,
        "exception_type": "UnknownOperation",
        "details": {"operation_name": "deleteCat"},
    }


def test_error_info_from_unexpected_exception():
    info = classify_exception(KeyError("store"))
    assert info.kind == ErrorKind.INTERNAL
    assert info.http_status == 500
    assert info.exception_type == "KeyError"


def test_error_info_omits_empty_details():
    info = classify_exception(MalformedRequest("bad"))
    assert "details" not in info.to_dict()


def test_route_not_found_maps_to_404():
    err = RouteNotFound("GET", "/unknown-path")
    assert err.http_status == 404
    assert err.message == "Not Found"
    info = classify_exception(err)
    assert info.kind == ErrorKind.NOT_FOUND
    assert info.details == {"method": "GET", "path": "/unknown-path"}

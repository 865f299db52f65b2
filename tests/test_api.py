from http import HTTPStatus

from ulys import Ulys


def test_hello(client):
    response = client.get("/api/")
    assert response.status_code == HTTPStatus.OK


def test_generate_one(client):
    response = client.get("/api/ulys")
    assert response.status_code == HTTPStatus.OK
    ulyses = response.get_json()["ulyses"]
    assert len(ulyses) == 1
    assert Ulys.from_string(ulyses[0])


def test_generate_monotonic_batch(client):
    response = client.get("/api/ulys?count=20&monotonic=true")
    assert response.status_code == HTTPStatus.OK
    ulyses = response.get_json()["ulyses"]
    assert len(ulyses) == 20
    assert ulyses == sorted(ulyses)
    assert len(set(ulyses)) == 20


def test_monotonic_across_requests(client):
    first = client.get("/api/ulys?count=5&monotonic=true").get_json()["ulyses"]
    second = client.get("/api/ulys?count=5&monotonic=true").get_json()["ulyses"]
    assert first[-1] < second[0]


def test_generate_bad_count(client):
    assert client.get("/api/ulys?count=zero").status_code == HTTPStatus.BAD_REQUEST
    assert client.get("/api/ulys?count=0").status_code == HTTPStatus.BAD_REQUEST
    assert client.get("/api/ulys?count=51").status_code == HTTPStatus.BAD_REQUEST


def test_inspect(client):
    response = client.get("/api/ulys/21850M2GA1850M2GA1850M2GA1")
    assert response.status_code == HTTPStatus.OK
    body = response.get_json()
    assert body["string"] == "21850m2ga1850m2ga1850m2ga1"
    assert body["raw"] == "41" * 16
    assert body["timestamp_ms"] == 0x4141_4141_4141


def test_inspect_invalid(client):
    response = client.get("/api/ulys/21850m2ga1850m2ga1850m2gai")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert b"invalid character" in response.data

    response = client.get("/api/ulys/short")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert b"invalid length" in response.data


def test_request_logging(app, caplog):
    app.config["LOG_REQUESTS"] = True
    with caplog.at_level("INFO", logger="ulys"):
        app.test_client().get("/api/")
    assert any("GET /api/" in record.getMessage() for record in caplog.records)

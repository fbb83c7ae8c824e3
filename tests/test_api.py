import pytest

from pulselab.agent import ConfigStore
from pulselab.api import create_app
from pulselab.error_budget import compute_error_budget
from pulselab.schema import HardwareParams

GARNET = {"anharmonicity_mhz": -200, "t1_us": 37, "t2_us": 9.6, "gate_time_ns": 20}


@pytest.fixture
def store():
    return ConfigStore()


@pytest.fixture
def client(store):
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()


def test_error_budget(client):
    response = client.post("/api/error-budget", json=GARNET)
    assert response.status_code == 200

    data = response.get_json()
    expected = compute_error_budget(HardwareParams.from_dict(GARNET))
    assert data["regime"] == "drag_sufficient"
    assert data["decoherence_floor"]["total"] == expected.decoherence_floor.total
    assert data["estimated_infidelity"]["gaussian"] == expected.estimated_infidelity.gaussian
    assert data["drag_beta"] == expected.drag_beta
    assert data["recommendation"] == expected.recommendation
    assert data["warnings"] == []


def test_error_budget_alias(client):
    body = dict(GARNET)
    body["alpha_mhz"] = body.pop("anharmonicity_mhz")
    assert client.post("/api/error-budget", json=body).status_code == 200


def test_error_budget_validation_error(client):
    response = client.post("/api/error-budget", json=dict(GARNET, t2_us=0))
    assert response.status_code == 400
    data = response.get_json()
    assert data["issues"][0]["kind"] == "NonPositiveParameter"
    assert data["issues"][0]["field"] == "t2_us"


def test_error_budget_warning(client):
    body = dict(GARNET, anharmonicity_mhz=200)
    assert client.post("/api/error-budget", json=body).status_code == 400

    response = client.post("/api/error-budget", json=dict(body, accept_warnings=True))
    assert response.status_code == 200
    assert response.get_json()["warnings"][0]["kind"] == "UnusualAnharmonicitySign"


def test_malformed_body(client):
    assert client.post("/api/error-budget", data="nope", content_type="application/json").status_code == 400
    response = client.post("/api/error-budget", json={"t1_us": 37})
    assert response.status_code == 400
    assert "Missing hardware parameter" in response.get_json()["error"]


def test_robustness(client):
    response = client.post("/api/robustness", json=GARNET)
    assert response.status_code == 200
    methods = [r["method"] for r in response.get_json()]
    assert methods == ["Gaussian", "DRAG", "GRAPE"]


def test_configs(client, store):
    assert client.get("/api/configs").get_json() == []

    response = client.post("/api/configs", json=dict(GARNET, name="Q3"))
    assert response.status_code == 201
    assert response.get_json()["params"]["t2_us"] == 9.6
    assert store.get("Q3") is not None

    listing = client.get("/api/configs").get_json()
    assert [c["name"] for c in listing] == ["Q3"]

    assert client.post("/api/configs", json=GARNET).status_code == 400


def test_accept_warnings_must_be_boolean(client):
    body = dict(GARNET, anharmonicity_mhz=200)
    response = client.post("/api/error-budget", json=dict(body, accept_warnings="false"))
    assert response.status_code == 400
    assert response.get_json()["error"] == "accept_warnings must be a JSON boolean."

    assert client.post("/api/error-budget", json=dict(body, accept_warnings=False)).status_code == 400


def test_tiny_gate_time_is_rejected(client):
    response = client.post("/api/error-budget", json=dict(GARNET, gate_time_ns=1e-80))
    assert response.status_code == 400
    assert response.get_json()["issues"][0]["kind"] == "OutOfRangeParameter"

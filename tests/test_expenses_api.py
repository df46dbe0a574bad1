import datetime

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from fintrack.core.dependencies import get_expense_service
from fintrack.main import create_app

from .helpers import SCENARIO_JSON, SCENARIO_ROWS, create_schema, make_database, seed


def test_returns_scenario_rows(api_client, db_path):
    seed(db_path, SCENARIO_ROWS)

    response = api_client.get("/expenses")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == SCENARIO_JSON


def test_whole_amounts_are_serialized_as_integers(api_client, db_path):
    seed(db_path, SCENARIO_ROWS)

    response = api_client.get("/expenses")

    assert response.text == (
        '[{"id":1,"category":"Food","amount":12.5,"date":"2024-01-05"},'
        '{"id":2,"category":"Rent","amount":900,"date":"2024-01-01"}]'
    )


def test_empty_table_returns_empty_list(api_client):
    response = api_client.get("/expenses")

    assert response.status_code == 200
    assert response.json() == []


def test_returns_one_element_per_row_with_typed_fields(api_client, db_path):
    rows = [
        {
            "category": f"Category {i}",
            "amount": i * 1.25 - 3,
            "date": datetime.date(2024, 2, 1) + datetime.timedelta(days=i),
        }
        for i in range(7)
    ]
    seed(db_path, rows)

    body = api_client.get("/expenses").json()

    assert len(body) == 7
    assert len({item["id"] for item in body}) == 7
    for item in body:
        assert set(item) == {"id", "category", "amount", "date"}
        assert isinstance(item["id"], int)
        assert isinstance(item["category"], str)
        assert isinstance(item["amount"], (int, float))
        datetime.date.fromisoformat(item["date"])


def test_negative_amounts_are_served_unchanged(api_client, db_path):
    seed(db_path, [{"category": "Refund", "amount": -20.0, "date": datetime.date(2024, 3, 3)}])

    assert api_client.get("/expenses").json()[0]["amount"] == -20.0


def test_unreachable_database_returns_server_error(tmp_path):
    database = make_database(tmp_path / "missing-dir" / "expenses.db")

    with TestClient(create_app(database=database)) as client:
        first = client.get("/expenses")
        second = client.get("/expenses")
        ping = client.get("/ping")

    assert first.status_code == 500
    assert first.json() == {"error": {"message": "Database operation failed"}}
    assert second.status_code == 500
    assert ping.status_code == 200


def test_recovers_once_database_is_available(tmp_path):
    db_path = tmp_path / "expenses.db"

    with TestClient(create_app(database=make_database(db_path))) as client:
        # The file exists but the table does not yet
        assert client.get("/expenses").status_code == 500

        create_schema(db_path)
        seed(db_path, SCENARIO_ROWS)

        response = client.get("/expenses")

    assert response.status_code == 200
    assert response.json() == SCENARIO_JSON


def test_every_request_rereads_the_table(api_client, db_path):
    assert api_client.get("/expenses").json() == []

    seed(db_path, SCENARIO_ROWS[:1])

    assert len(api_client.get("/expenses").json()) == 1


def test_cors_allows_any_origin(api_client):
    response = api_client.get("/expenses", headers={"Origin": "http://anywhere.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_request_id_is_echoed(api_client):
    response = api_client.get("/expenses", headers={"x-request-id": "abc-123"})

    assert response.headers["x-request-id"] == "abc-123"


def test_request_id_is_generated_when_missing(api_client):
    response = api_client.get("/ping")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.headers["x-request-id"] == response.json()["request_id"]


def test_unknown_route_uses_error_envelope(api_client):
    response = api_client.get("/budgets")

    assert response.status_code == 404
    assert "message" in response.json()["error"]


def test_write_methods_are_not_allowed(api_client):
    response = api_client.post("/expenses", json={"category": "Food"})

    assert response.status_code == 405


def test_database_error_outside_the_service_uses_error_envelope(db_path):
    class FailingService:
        async def get_expenses(self, db):
            raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    app = create_app(database=make_database(db_path))
    app.dependency_overrides[get_expense_service] = lambda: FailingService()

    with TestClient(app) as client:
        response = client.get("/expenses")

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "Database operation failed"}}

from fastapi.testclient import TestClient

from app.server import app

client = TestClient(app)


def test_puzzle_data():
    response = client.get("/api/puzzle")
    assert response.status_code == 200

    data = response.json()
    assert data["left"] == ["White", "Red", "White", "Yellow"]
    assert data["bottom"] == ["Green", "Green", "White", "Green"]
    assert len(data["pieces"]) == 16
    assert data["pieces"][5] == {"index": 5, "dots": ["Blue", "White", "White"]}


def test_solve_first_cell():
    response = client.post("/api/solve", json={"rows": 1})
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["count"] == 4
    assert data["solutions"][0] == [[{"piece": 3, "rotation": 2}]]


def test_solve_two_rows_unique_and_capped():
    data = client.post("/api/solve", json={"rows": 2, "unique": True}).json()
    assert data["count"] == 17

    data = client.post("/api/solve", json={"rows": 2, "max_solutions": 2}).json()
    assert data["count"] == 2
    assert data["solutions"][0][1] == [
        {"piece": 0, "rotation": 0},
        {"piece": 8, "rotation": 1},
        {"piece": 6, "rotation": 2},
    ]


def test_solve_rejects_bad_rows():
    response = client.post("/api/solve", json={"rows": 0})
    assert response.status_code == 422
    assert "rows" in response.json()["detail"]

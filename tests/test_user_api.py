from datetime import timedelta

import jwt

from config.settings import settings
from utils.helpers import ordinal, utc_now


def test_signup_returns_token_and_public_user(client, users_collection):
    response = client.post(
        "/api/user/signup",
        json={"name": "Ada", "email": "Ada@Example.com", "password": "squats4life", "img": "a.png"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["status"] == "active"
    assert "passwordHash" not in body["user"]
    assert body["user"]["_id"] == users_collection.documents[0]["user_id"]
    assert users_collection.documents[0]["password_hash"] != "squats4life"

    claims = jwt.decode(body["token"], settings.token_secret, algorithms=[settings.jwt_algorithm])
    assert claims["user"]["_id"] == body["user"]["_id"]


def test_signup_requires_all_fields(client):
    response = client.post("/api/user/signup", json={"email": "ada@example.com", "password": "x"})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "status": 400,
        "message": "Name, email and password are required.",
        "error": "Name, email and password are required.",
    }


def test_signup_rejects_duplicate_email_case_insensitively(client, auth_headers):
    response = client.post(
        "/api/user/signup",
        json={"name": "Ada again", "email": "ADA@example.com", "password": "other"},
    )
    assert response.status_code == 409
    assert response.json()["message"] == "Email is already in use."


def test_signin(client, auth_headers):
    response = client.post("/api/user/signin", json={"email": "ada@example.com", "password": "squats4life"})
    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Ada"


def test_signin_errors(client, auth_headers):
    missing = client.post("/api/user/signin", json={"email": "ada@example.com"})
    unknown = client.post("/api/user/signin", json={"email": "bob@example.com", "password": "x"})
    wrong = client.post("/api/user/signin", json={"email": "ada@example.com", "password": "nope"})

    assert missing.status_code == 400
    assert unknown.status_code == 404
    assert unknown.json()["message"] == "User not found"
    assert wrong.status_code == 403
    assert wrong.json()["message"] == "Incorrect password"


def test_protected_routes_require_a_token(client):
    response = client.get("/api/user/dashboard")
    assert response.status_code == 401
    assert response.json()["message"] == "You are not authenticated!"


def test_invalid_and_expired_tokens(client):
    invalid = client.get("/api/user/workout", headers={"Authorization": "Bearer not-a-token"})

    expired_token = jwt.encode(
        {"user": {"_id": "u1"}, "exp": utc_now() - timedelta(minutes=1)},
        settings.token_secret,
        algorithm=settings.jwt_algorithm,
    )
    expired = client.get("/api/user/workout", headers={"Authorization": f"Bearer {expired_token}"})

    assert invalid.status_code == 401
    assert invalid.json()["message"] == "Invalid token"
    assert expired.status_code == 401
    assert expired.json()["message"] == "Token expired"


def test_token_without_user_id_is_rejected(client):
    token = jwt.encode({"user": {"name": "ghost"}}, settings.token_secret, algorithm=settings.jwt_algorithm)
    response = client.get("/api/user/workout", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "User context missing"


def test_add_workouts_stores_parsed_blocks(client, auth_headers, sample_workouts, workouts_collection):
    response = client.post("/api/user/workout", json={"workoutString": sample_workouts}, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Workouts added successfully"
    assert [w["workoutName"] for w in body["workouts"]] == ["Back Squat", "Bench Press", "Deadlift"]
    assert [w["caloriesBurned"] for w in body["workouts"]] == [1500, 4500, 4800]
    assert len(workouts_collection.documents) == 3


def test_add_workouts_validation(client, auth_headers):
    missing = client.post("/api/user/workout", json={}, headers=auth_headers)
    separators_only = client.post("/api/user/workout", json={"workoutString": ";;"}, headers=auth_headers)
    malformed = client.post(
        "/api/user/workout",
        json={"workoutString": "#Legs\n-Squat\n-5 sets 5 reps"},
        headers=auth_headers,
    )

    assert missing.status_code == 400
    assert missing.json()["message"] == "Workout string is missing"
    assert separators_only.status_code == 400
    assert separators_only.json()["message"] == "Unable to parse workouts from input."
    assert malformed.status_code == 400
    assert malformed.json()["message"] == "Workout string is missing for 1st workout"


def test_get_workouts_by_date(client, auth_headers, sample_workouts):
    client.post("/api/user/workout", json={"workoutString": sample_workouts}, headers=auth_headers)
    today = utc_now().date().isoformat()

    todays = client.get("/api/user/workout", params={"date": today}, headers=auth_headers)
    default = client.get("/api/user/workout", headers=auth_headers)
    other_day = client.get("/api/user/workout", params={"date": "2001-01-01"}, headers=auth_headers)
    invalid = client.get("/api/user/workout", params={"date": "not-a-date"}, headers=auth_headers)

    assert todays.status_code == 200
    assert len(todays.json()["todaysWorkouts"]) == 3
    assert todays.json()["totalCaloriesBurnt"] == 10800
    assert default.json() == todays.json()
    assert other_day.json() == {"todaysWorkouts": [], "totalCaloriesBurnt": 0}
    assert invalid.status_code == 400
    assert invalid.json()["message"] == "Invalid date supplied."


def test_dashboard_summarises_today_and_the_week(client, auth_headers, sample_workouts):
    client.post("/api/user/workout", json={"workoutString": sample_workouts}, headers=auth_headers)

    response = client.get("/api/user/dashboard", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["totalCaloriesBurnt"] == 10800
    assert body["totalWorkouts"] == 3
    assert body["avgCaloriesBurntPerWorkout"] == 3600
    assert body["pieChartData"] == [
        {"id": 0, "value": 1500, "label": "Legs"},
        {"id": 1, "value": 4500, "label": "Chest"},
        {"id": 2, "value": 4800, "label": "Back"},
    ]
    week = body["totalWeeksCaloriesBurnt"]
    assert week["weeks"][-1] == ordinal(utc_now().day)
    assert week["caloriesBurned"] == [0, 0, 0, 0, 0, 0, 10800]


def test_dashboard_for_deleted_user_is_not_found(client, auth_headers, users_collection):
    users_collection.documents.clear()

    response = client.get("/api/user/dashboard", headers=auth_headers)
    assert response.status_code == 404


def test_unknown_route_lists_available_routes(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "Route not found: GET /api/nowhere"
    assert "/api/user/*" in body["availableRoutes"]


def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json()["status"] == "healthy"

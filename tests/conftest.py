"""Shared fixtures: in-memory collections and an API client wired to them."""

import copy
import itertools
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from api.main import app
from models.user_repository import UserRepository, get_user_repository
from models.workout_repository import WorkoutRepository, get_workout_repository


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    def sort(self, key, direction=1):
        self.documents.sort(key=lambda doc: doc.get(key), reverse=direction == -1)
        return self

    async def to_list(self, length=None):
        return self.documents if length is None else self.documents[:length]


class FakeCollection:
    """Just enough of a motor collection for the repositories."""

    _ids = itertools.count(1)

    def __init__(self, unique=()):
        self.documents = []
        self.unique = unique
        self.insert_many_calls = 0

    @staticmethod
    def _matches(document, query):
        for key, condition in query.items():
            value = document.get(key)
            if isinstance(condition, dict):
                for operator, operand in condition.items():
                    if operator == "$gte" and not value >= operand:
                        return False
                    if operator == "$lt" and not value < operand:
                        return False
            elif value != condition:
                return False
        return True

    @staticmethod
    def _project(document, projection):
        result = copy.deepcopy(document)
        if projection and projection.get("_id") == 0:
            result.pop("_id", None)
        return result

    async def insert_one(self, document):
        for key in self.unique:
            if any(existing.get(key) == document.get(key) for existing in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error index: {key}_1")
        stored = copy.deepcopy(document)
        stored["_id"] = next(self._ids)
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def insert_many(self, documents):
        self.insert_many_calls += 1
        ids = [(await self.insert_one(document)).inserted_id for document in documents]
        return SimpleNamespace(inserted_ids=ids)

    async def find_one(self, query, projection=None):
        for document in self.documents:
            if self._matches(document, query):
                return self._project(document, projection)
        return None

    def find(self, query, projection=None):
        return FakeCursor([
            self._project(document, projection)
            for document in self.documents
            if self._matches(document, query)
        ])


@pytest.fixture
def users_collection():
    return FakeCollection(unique=("user_id", "email"))


@pytest.fixture
def workouts_collection():
    return FakeCollection(unique=("workout_id",))


@pytest.fixture
def user_repository(users_collection):
    return UserRepository(users_collection)


@pytest.fixture
def workout_repository(workouts_collection):
    return WorkoutRepository(workouts_collection)


@pytest.fixture
def client(user_repository, workout_repository):
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_workout_repository] = lambda: workout_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/user/signup",
        json={"name": "Ada", "email": "Ada@Example.com", "password": "squats4life"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


SAMPLE_WORKOUTS = """#Legs
-Back Squat
-5 sets 15 reps
-30 kg
-10 min; #Chest
-Bench Press
-4 setsX 12 reps
-60 kg
-15 min; #Back
-Deadlift
-3 sets x 8 reps
-80 kg
-12 min"""


@pytest.fixture
def sample_workouts():
    return SAMPLE_WORKOUTS

"""Workouts collection access."""

import uuid
from datetime import datetime
from typing import List, Optional

from models.database import get_workouts_collection
from schemas.workout import ParsedWorkout, Workout
from utils.helpers import utc_now
from utils.logger import setup_logger

logger = setup_logger(__name__)

MAX_BATCH_WRITE = 25


class WorkoutRepository:
    """Reads and writes workout documents."""

    def __init__(self, collection):
        self.collection = collection

    async def put_workouts(
        self,
        user_id: str,
        workouts: List[ParsedWorkout],
        calories: Optional[List[float]] = None,
        created_at: Optional[datetime] = None,
    ) -> List[Workout]:
        """Store a batch of parsed workouts for one user.

        ``calories`` is aligned with ``workouts``; documents are written in
        chunks of MAX_BATCH_WRITE.
        """
        if not workouts:
            return []

        timestamp = created_at or utc_now()
        records = [
            Workout(
                **workout.model_dump(),
                workout_id=str(uuid.uuid4()),
                user_id=user_id,
                calories_burned=calories[index] if calories else 0,
                created_at=timestamp,
            )
            for index, workout in enumerate(workouts)
        ]

        documents = [record.model_dump() for record in records]
        for start in range(0, len(documents), MAX_BATCH_WRITE):
            await self.collection.insert_many(documents[start:start + MAX_BATCH_WRITE])

        logger.info(f"Stored {len(records)} workouts for user {user_id}")
        return records

    async def get_workouts_within_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[Workout]:
        """Workouts with ``start <= created_at < end``, oldest first."""
        cursor = self.collection.find(
            {"user_id": user_id, "created_at": {"$gte": start, "$lt": end}},
            {"_id": 0},
        ).sort("created_at", 1)
        documents = await cursor.to_list(length=None)
        return [Workout(**document) for document in documents]

    async def get_workouts_for_day(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[Workout]:
        return await self.get_workouts_within_range(user_id, start, end)


def get_workout_repository() -> WorkoutRepository:
    return WorkoutRepository(get_workouts_collection())

"""Shared fixtures: services bound to an in-memory SQLite database."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool

from src.clients.media_service_client import MediaServiceClient
from src.db.postgres_client import PostgresConnection
from src.services.course_part_service import CoursePartService
from src.services.course_service import CourseService
from src.services.physical_good_service import PhysicalGoodService
from src.services.product_service import ProductService
from src.services.seminar_service import SeminarService
from src.services.training_session_service import TrainingSessionService


@pytest.fixture
def database():
    database = PostgresConnection("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    database.create_tables()
    yield database
    database.drop_tables()
    database.dispose()


@pytest.fixture
def course_service(database):
    return CourseService(database)


@pytest.fixture
def course_part_service(database):
    return CoursePartService(database)


@pytest.fixture
def training_session_service(database):
    return TrainingSessionService(database)


@pytest.fixture
def seminar_service(database):
    return SeminarService(database)


@pytest.fixture
def physical_good_service(database):
    return PhysicalGoodService(database)


@pytest.fixture
def product_service(database):
    return ProductService(database)


@pytest.fixture
def media_client():
    client = MagicMock(spec=MediaServiceClient)
    client.video_exists.return_value = True
    return client


@pytest.fixture
def course_payload():
    return {
        "name": "Python Basics",
        "short_description": "Learn the language",
        "topic": "Programming",
        "access_duration": 30,
        "price": "49.90",
    }


@pytest.fixture
def training_session_payload():
    return {
        "name": "Code Review",
        "short_description": "One on one review",
        "duration_minutes": 60,
        "format": "online",
        "price": "120.00",
    }


@pytest.fixture
def seminar_payload():
    start = datetime.now(timezone.utc) + timedelta(days=30)
    return {
        "name": "Data Summit",
        "short_description": "Annual meetup",
        "place": "Berlin",
        "date": start.isoformat(),
        "ending_date": (start + timedelta(hours=8)).isoformat(),
        "late_payment_date": (start - timedelta(days=7)).isoformat(),
        "price": "300.00",
    }


@pytest.fixture
def physical_good_payload():
    return {
        "name": "Workbook",
        "short_description": "Printed exercises",
        "shipping_required": True,
        "price": "15.50",
    }

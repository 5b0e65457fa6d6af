# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the course API endpoints."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tms_sync.api import create_app
from tms_sync.core.config import Settings
from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.exceptions import StoreError, UnavailableError
from tms_sync.infrastructure.store.file_store import GRANTS_FILE, JsonFileStore
from tms_sync.models import Course

pytestmark = pytest.mark.integration


@pytest.fixture
def app(tmp_path: Path, sample_course: Course, empty_course: Course) -> FastAPI:
    """Create test FastAPI app over a file store holding the sample courses."""
    store = JsonFileStore(tmp_path / "data", seed=False)
    store.data_dir.mkdir(parents=True)
    store._save_courses([sample_course, empty_course])
    (store.data_dir / GRANTS_FILE).write_text(
        '[{"id": "g1", "courseId": "c1", "status": "Pending"}]', encoding="utf-8"
    )
    return create_app(store=store, settings=Settings())


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create test client; entering it runs the lifespan that initializes the store."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failing_client() -> TestClient:
    """Create a client whose store is unreachable."""
    store = AsyncMock(spec=RemoteStore)
    store.list_courses.side_effect = UnavailableError("disk full")
    store.list_grants.side_effect = StoreError("backend error")
    return TestClient(create_app(store=store, settings=Settings()))


class TestCoursesAPIRouting:
    """Tests for course API routing."""

    def test_routes_registered(self, app: FastAPI) -> None:
        """Test that course and collection routes are registered."""
        routes = [route.path for route in app.routes]

        # Whole documents
        assert "/api/v1/courses" in routes
        assert "/api/v1/courses/{course_id}" in routes

        # Nested fields
        assert "/api/v1/courses/{course_id}/bookmarks/{subtopic_id}/toggle" in routes
        assert (
            "/api/v1/courses/{course_id}/learners/{email}/completions/{subtopic_id}/toggle"
            in routes
        )
        assert "/api/v1/courses/{course_id}/learners/{email}/grades/{assessment_id}" in routes
        assert "/api/v1/courses/{course_id}/learners/{email}/grades" in routes
        assert "/api/v1/courses/{course_id}/assessments/{assessment_id}" in routes
        assert "/api/v1/courses/{course_id}/learners/{email}/submissions/{assessment_id}" in routes
        assert "/api/v1/courses/{course_id}/learners/{email}" in routes

        # Flat collections
        assert "/api/v1/calendar-events" in routes
        assert "/api/v1/grant-applications" in routes
        assert "/api/v1/grant-applications/{grant_id}/status" in routes
        assert "/api/v1/job-postings" in routes
        assert "/api/v1/learners" in routes

        assert "/health" in routes


class TestCoursesAPIEndpoints:
    """Tests for course API endpoints."""

    def test_list_courses_envelope(self, client: TestClient) -> None:
        """Test the success envelope and camelCase documents."""
        response = client.get("/api/v1/courses")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [doc["id"] for doc in body["data"]] == ["c1", "c2"]
        assert body["data"][0]["trainingHours"] == 20

    def test_create_course(self, client: TestClient) -> None:
        """Test that creation answers 201 with the assigned id."""
        response = client.post("/api/v1/courses", json={"title": "Cloud Basics"})

        assert response.status_code == 201
        assert response.json()["data"]["id"].startswith("course_")

    def test_replace_uses_path_id(self, client: TestClient) -> None:
        """Test that the path id overrides the body id."""
        response = client.put(
            "/api/v1/courses/c2",
            json={"id": "other", "title": "Agile Practitioner"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["id"] == "c2"
        assert client.get("/api/v1/courses/c2").json()["data"]["title"] == "Agile Practitioner"

    def test_get_missing_course(self, client: TestClient) -> None:
        """Test the 404 error envelope."""
        response = client.get("/api/v1/courses/ghost")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Course with id ghost not found.",
        }

    def test_delete_course(self, client: TestClient) -> None:
        """Test deletion answers with a null payload."""
        response = client.delete("/api/v1/courses/c2")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": None}

    def test_grade_with_encoded_email(self, client: TestClient) -> None:
        """Test that a percent-encoded email reaches the roster lookup."""
        response = client.put(
            "/api/v1/courses/c1/learners/bob%40example.com/grades/a2",
            json={"status": "NYC"},
        )

        assert response.status_code == 200
        learner = response.json()["data"]["learners"][0]
        assert {"assessmentId": "a2", "status": "NYC"} in learner["assessmentGrades"]

    def test_grade_unknown_assessment(self, client: TestClient) -> None:
        """Test that an undefined assessment answers 404."""
        response = client.put(
            "/api/v1/courses/c1/learners/bob%40example.com/grades/a9",
            json={"status": "C"},
        )

        assert response.status_code == 404

    def test_invalid_grade_status(self, client: TestClient) -> None:
        """Test request validation of the grade status."""
        response = client.put(
            "/api/v1/courses/c1/learners/bob%40example.com/grades/a1",
            json={"status": "Excellent"},
        )

        assert response.status_code == 422

    def test_submission(self, client: TestClient) -> None:
        """Test recording a submission."""
        response = client.put(
            "/api/v1/courses/c1/learners/bob%40example.com/submissions/a1",
            json={"fileName": "report.pdf"},
        )

        submissions = response.json()["data"]["learners"][0]["submissions"]
        assert [s["fileName"] for s in submissions] == ["report.pdf"]

    def test_review_grant(self, client: TestClient) -> None:
        """Test the grant status endpoint."""
        response = client.patch(
            "/api/v1/grant-applications/g1/status", json={"status": "Rejected"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "Rejected"


class TestStoreFailures:
    """Tests for store failure mapping."""

    def test_unavailable_maps_to_503(self, failing_client: TestClient) -> None:
        """Test that UnavailableError answers 503."""
        response = failing_client.get("/api/v1/courses")

        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "disk full"}

    def test_generic_store_error_maps_to_503(self, failing_client: TestClient) -> None:
        """Test that any other StoreError answers 503."""
        response = failing_client.get("/api/v1/grant-applications")

        assert response.status_code == 503


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        """Test the health payload names the store backend."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["store"] == "JsonFileStore"
        assert body["environment"] == "development"

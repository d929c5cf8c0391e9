"""Unit tests for the shared model base classes and field types."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from freelancerpro.models import (
    BaseDataModel,
    Client,
    ClientUpdate,
    ContractUpdate,
    Project,
    ProjectUpdate,
    Quote,
    QuoteUpdate,
    Task,
    TaskUpdate,
    TeamMemberUpdate,
    User,
)

NOW = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def _client(**overrides):
    fields = {
        "id": "c1",
        "createdAt": NOW,
        "updatedAt": NOW,
        "userId": "u1",
        "name": "Acme",
        "email": "hello@acme.com",
    }
    fields.update(overrides)
    return Client.model_validate(fields)


class TestBaseDataModel:
    """Test camelCase aliasing and strictness."""

    def test_accepts_snake_and_camel_case(self):
        class Note(BaseDataModel):
            user_id: str

        assert Note(userId="u1").user_id == "u1"
        assert Note(user_id="u1").user_id == "u1"

    def test_to_document_uses_camel_case(self):
        doc = _client().to_document()
        assert doc["userId"] == "u1"
        assert "createdAt" in doc
        assert "user_id" not in doc

    def test_unknown_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            _client(favouriteColour="blue")

    def test_assignment_is_validated(self):
        client = _client()
        with pytest.raises(ValidationError):
            client.email = "not-an-email"


class TestFieldTypes:
    """Test the reusable constrained types."""

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _client(name="   ")
        assert "cannot be empty or whitespace" in str(exc_info.value)

    def test_name_is_stripped(self):
        assert _client(name="  Acme  ").name == "Acme"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            _client(email="acme.com")

    def test_blank_optional_text_becomes_none(self):
        client = _client(company="  ", notes="")
        assert client.company is None
        assert client.notes is None

    def test_naive_timestamps_are_treated_as_utc(self):
        client = _client(createdAt=datetime(2024, 1, 1, 12, 0))
        assert client.created_at.tzinfo is not None
        assert client.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_offset_timestamps_are_normalised(self):
        plus_two = timezone(timedelta(hours=2))
        client = _client(createdAt=datetime(2024, 1, 1, 14, 0, tzinfo=plus_two))
        assert client.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert client.created_at.utcoffset() == timedelta(0)

    def test_iso_strings_with_z_suffix_parse(self):
        client = _client(createdAt="2024-01-15T00:00:00.000Z")
        assert client.created_at == datetime(2024, 1, 15, tzinfo=timezone.utc)


class TestProjectConstraints:
    """Test progress and budget bounds."""

    def _project(self, **overrides):
        fields = {
            "id": "p1",
            "createdAt": NOW,
            "updatedAt": NOW,
            "userId": "u1",
            "name": "Website",
        }
        fields.update(overrides)
        return Project.model_validate(fields)

    def test_defaults(self):
        project = self._project()
        assert project.status.value == "planning"
        assert project.progress == 0
        assert project.budget is None
        assert project.client_id is None

    @pytest.mark.parametrize("progress", [-1, 101])
    def test_progress_out_of_range(self, progress):
        with pytest.raises(ValidationError):
            self._project(progress=progress)

    def test_negative_budget_rejected(self):
        with pytest.raises(ValidationError):
            self._project(budget=-5)

    def test_budget_is_decimal_and_serialised_as_string(self):
        project = self._project(budget="1500.50")
        assert project.budget == Decimal("1500.50")
        assert project.to_document()["budget"] == "1500.50"

    def test_large_budget_reloads_exactly(self):
        budget = Decimal("12345678901234567.89")
        document = self._project(budget=budget).to_document()
        assert Project.model_validate(document).budget == budget

    def test_numeric_budget_still_accepted(self):
        assert self._project(budget=1500.5).budget == Decimal("1500.5")

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            self._project(status="on_hold")


class TestOtherEntities:
    """Spot checks on the remaining entity models."""

    def test_task_defaults(self):
        task = Task.model_validate(
            {"id": "t1", "createdAt": NOW, "updatedAt": NOW, "userId": "u1", "title": "Write"}
        )
        assert task.status.value == "pending"
        assert task.priority.value == "medium"
        assert task.due_date is None

    def test_task_priority_rank(self):
        from freelancerpro.models import TaskPriority

        assert TaskPriority.HIGH.rank > TaskPriority.MEDIUM.rank > TaskPriority.LOW.rank

    def test_quote_requires_client(self):
        with pytest.raises(ValidationError):
            Quote.model_validate(
                {
                    "id": "q1",
                    "createdAt": NOW,
                    "updatedAt": NOW,
                    "userId": "u1",
                    "title": "Logo",
                    "amount": 100,
                }
            )

    def test_user_without_password(self):
        user = User(
            id="u1",
            created_at=NOW,
            updated_at=NOW,
            email="ana@example.com",
            name="Ana",
            password="hash",
        )
        public = user.without_password()
        assert public.password == ""
        assert user.password == "hash"
        assert public.role.value == "freelancer"


class TestUpdateModels:
    """Test validation of partial updates before they are merged."""

    @pytest.mark.parametrize(
        "update_cls,field",
        [
            (ClientUpdate, "status"),
            (ClientUpdate, "name"),
            (ProjectUpdate, "progress"),
            (TaskUpdate, "priority"),
            (QuoteUpdate, "amount"),
            (QuoteUpdate, "client_id"),
            (ContractUpdate, "content"),
            (TeamMemberUpdate, "email"),
        ],
    )
    def test_null_for_required_field_rejected(self, update_cls, field):
        with pytest.raises(ValidationError, match="cannot be null"):
            update_cls.model_validate({field: None})

    def test_null_accepted_for_optional_fields(self):
        update = TaskUpdate.model_validate({"dueDate": None, "projectId": None})
        assert update.changes() == {"due_date": None, "project_id": None}

    def test_unset_fields_are_not_changes(self):
        assert ClientUpdate(name="Globex").changes() == {"name": "Globex"}

    @pytest.mark.parametrize("update_cls", [QuoteUpdate, ContractUpdate])
    def test_blank_client_reference_rejected(self, update_cls):
        with pytest.raises(ValidationError):
            update_cls(client_id="  ")

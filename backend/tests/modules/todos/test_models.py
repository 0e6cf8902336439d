"""Tests for todo request models."""

import pytest
from pydantic import ValidationError

from modules.todos.models import TodoCategory, UpdateTodoRequest


class TestUpdateTodoRequest:

    def test_only_sent_fields_are_written(self):
        request = UpdateTodoRequest(category="work")
        assert request.to_update_dict() == {"category": "work"}

    @pytest.mark.parametrize("field", ["title", "completed", "category", "priority"])
    def test_null_rejected_for_required_columns(self, field):
        with pytest.raises(ValidationError, match="cannot be null"):
            UpdateTodoRequest.model_validate({field: None})

    @pytest.mark.parametrize("field", ["description", "due_date"])
    def test_null_allowed_for_nullable_columns(self, field):
        request = UpdateTodoRequest.model_validate({field: None})
        assert request.to_update_dict() == {field: None}

    def test_valid_values_pass_through(self):
        request = UpdateTodoRequest(completed=False, category=TodoCategory.OTHER, priority="low")
        assert request.to_update_dict() == {
            "completed": False,
            "category": "other",
            "priority": "low",
        }

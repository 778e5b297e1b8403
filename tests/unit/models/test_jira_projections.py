"""Tests for the Jira projection models."""

import json

from jira_mcp.models.jira import (
    JiraAttachment,
    JiraIssue,
    JiraProject,
    JiraStatus,
    JiraTransition,
)
from tests.fixtures.jira_mocks import (
    MOCK_JIRA_ATTACHMENTS,
    MOCK_JIRA_PROJECTS,
    MOCK_JIRA_TRANSITIONS,
)
from tests.utils.factories import JiraIssueFactory

ISSUE_PROJECTION_KEYS = [
    "id",
    "key",
    "summary",
    "description",
    "status",
    "assignee",
    "created",
    "updated",
    "duedate",
    "priority",
]


class TestJiraIssue:
    def test_full_projection_shape_and_order(self):
        issue = JiraIssue.from_api_response(JiraIssueFactory.create("TEST-7"))
        result = issue.to_simplified_dict()

        assert list(result) == ISSUE_PROJECTION_KEYS
        assert result["key"] == "TEST-7"
        assert result["status"] == {
            "name": "Open",
            "id": "1",
            "statusCategory": {"key": "new"},
        }
        assert result["priority"] == {"name": "Medium", "id": "3"}

    def test_fields_beyond_projection_are_dropped(self):
        issue = JiraIssue.from_api_response(JiraIssueFactory.create())
        result = issue.to_simplified_dict()

        assert "issuetype" not in result
        assert "self" not in result
        assert "fields" not in result
        assert "attachments" not in result

    def test_missing_fields_are_absent_not_fabricated(self):
        issue = JiraIssue.from_api_response(
            {"id": "10001", "key": "TEST-1", "fields": {"summary": "Fix bug"}}
        )
        assert issue.to_simplified_dict() == {
            "id": "10001",
            "key": "TEST-1",
            "summary": "Fix bug",
        }

    def test_explicit_nulls_are_kept(self):
        issue = JiraIssue.from_api_response(
            {
                "id": "10001",
                "key": "TEST-1",
                "fields": {"assignee": None, "duedate": None, "summary": "x"},
            }
        )
        result = issue.to_simplified_dict()

        assert result["assignee"] is None
        assert result["duedate"] is None
        assert "priority" not in result

    def test_only_restricts_keys(self):
        issue = JiraIssue.from_api_response(JiraIssueFactory.create())
        result = issue.to_simplified_dict(only=("status", "key", "id"))

        assert list(result) == ["id", "key", "status"]

    def test_adf_description_passes_through(self):
        adf = {"type": "doc", "version": 1, "content": []}
        issue = JiraIssue.from_api_response(
            {"id": "1", "key": "T-1", "fields": {"description": adf}}
        )
        assert issue.to_simplified_dict()["description"] == adf

    def test_attachments(self):
        issue = JiraIssue.from_api_response(
            JiraIssueFactory.create(fields={"attachment": MOCK_JIRA_ATTACHMENTS})
        )
        attachments = issue.attachments_to_simplified_list()

        assert attachments[0] == {
            "id": "10100",
            "filename": "screenshot.png",
            "created": "2024-01-02T10:00:00.000+0000",
            "size": 2048,
            "mimeType": "image/png",
            "content": "https://test.atlassian.net/secure/attachment/10100/screenshot.png",
            "thumbnail": "https://test.atlassian.net/secure/thumbnail/10100/screenshot.png",
        }
        assert "thumbnail" not in attachments[1]

    def test_no_attachments_is_empty_list(self):
        issue = JiraIssue.from_api_response(JiraIssueFactory.create_minimal())
        assert issue.attachments == []
        assert issue.attachments_to_simplified_list() == []

    def test_null_attachment_field_is_empty_list(self):
        issue = JiraIssue.from_api_response(
            {"id": "1", "key": "T-1", "fields": {"attachment": None}}
        )
        assert issue.attachments_to_simplified_list() == []

    def test_non_dict_data(self):
        assert JiraIssue.from_api_response(None).to_simplified_dict() == {}


class TestJiraProject:
    def test_projection(self):
        project = JiraProject.from_api_response(MOCK_JIRA_PROJECTS[1])

        assert project.to_simplified_dict() == {
            "id": "10001",
            "key": "OLD",
            "name": "Old Project",
            "archived": True,
            "projectTypeKey": "business",
            "simplified": True,
            "style": "next-gen",
        }

    def test_archived_defaults_to_false(self):
        result = JiraProject.from_api_response(MOCK_JIRA_PROJECTS[0]).to_simplified_dict()

        assert result["archived"] is False
        assert list(result) == [
            "id",
            "key",
            "name",
            "archived",
            "projectTypeKey",
            "simplified",
            "style",
        ]

    def test_null_archived_is_false(self):
        project = JiraProject.from_api_response({"id": "1", "key": "P", "archived": None})
        assert project.to_simplified_dict() == {"id": "1", "key": "P", "archived": False}


class TestJiraTransition:
    def test_projection(self):
        transition = JiraTransition.from_api_response(
            MOCK_JIRA_TRANSITIONS["transitions"][0]
        )

        assert transition.to_simplified_dict() == {
            "id": "21",
            "name": "Start Progress",
            "to": {
                "id": "3",
                "name": "In Progress",
                "statusCategory": {
                    "id": 4,
                    "key": "indeterminate",
                    "name": "In Progress",
                },
            },
        }
        assert transition.to_status_id == "3"

    def test_numeric_target_id_compares_as_string(self):
        transition = JiraTransition.from_api_response(
            {"id": 5, "name": "Close", "to": {"id": 6, "name": "Closed"}}
        )
        assert transition.to_status_id == "6"

    def test_missing_target(self):
        transition = JiraTransition.from_api_response({"id": "5", "name": "Close"})

        assert transition.to is None
        assert transition.to_status_id is None
        assert transition.to_simplified_dict() == {"id": "5", "name": "Close"}


class TestCommonModels:
    def test_status_drops_self_link(self):
        status = JiraStatus.from_api_response(
            {"self": "https://x", "id": "1", "name": "Open"}
        )
        assert status.to_simplified_dict() == {"id": "1", "name": "Open"}

    def test_attachment_is_json_serializable(self):
        attachment = JiraAttachment.from_api_response(MOCK_JIRA_ATTACHMENTS[1])
        assert json.loads(json.dumps(attachment.to_simplified_dict()))["size"] == 12

"""Raw Jira REST API payloads used across the unit tests."""

MOCK_JIRA_PROJECTS = [
    {
        "id": "10000",
        "key": "TEST",
        "name": "Test Project",
        "projectTypeKey": "software",
        "simplified": False,
        "style": "classic",
        "self": "https://test.atlassian.net/rest/api/2/project/10000",
    },
    {
        "id": "10001",
        "key": "OLD",
        "name": "Old Project",
        "archived": True,
        "projectTypeKey": "business",
        "simplified": True,
        "style": "next-gen",
    },
    {
        "id": "10002",
        "key": "DEMO",
        "name": "Demo Project",
        "archived": False,
        "projectTypeKey": "service_desk",
        "simplified": False,
        "style": "classic",
    },
]

MOCK_STATUS_IN_PROGRESS = {
    "self": "https://test.atlassian.net/rest/api/2/status/3",
    "id": "3",
    "name": "In Progress",
    "statusCategory": {"id": 4, "key": "indeterminate", "name": "In Progress"},
}

MOCK_STATUS_DONE = {
    "self": "https://test.atlassian.net/rest/api/2/status/10001",
    "id": "10001",
    "name": "Done",
    "statusCategory": {"id": 3, "key": "done", "name": "Done"},
}

MOCK_JIRA_TRANSITIONS = {
    "expand": "transitions",
    "transitions": [
        {
            "id": "21",
            "name": "Start Progress",
            "hasScreen": False,
            "to": MOCK_STATUS_IN_PROGRESS,
        },
        {
            "id": "31",
            "name": "Done",
            "hasScreen": False,
            "to": MOCK_STATUS_DONE,
        },
    ],
}

MOCK_JIRA_ATTACHMENTS = [
    {
        "self": "https://test.atlassian.net/rest/api/2/attachment/10100",
        "id": "10100",
        "filename": "screenshot.png",
        "author": {"displayName": "Test User"},
        "created": "2024-01-02T10:00:00.000+0000",
        "size": 2048,
        "mimeType": "image/png",
        "content": "https://test.atlassian.net/secure/attachment/10100/screenshot.png",
        "thumbnail": "https://test.atlassian.net/secure/thumbnail/10100/screenshot.png",
    },
    {
        "id": "10101",
        "filename": "notes.txt",
        "created": "2024-01-03T10:00:00.000+0000",
        "size": 12,
        "mimeType": "text/plain",
        "content": "https://test.atlassian.net/secure/attachment/10101/notes.txt",
    },
]

import json
import os
import sys

import httpx
import pytest

SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from ai_log_settings import Settings


class RecordingNotion:
    """Fake Notion API: records every append call, optionally fails on call N."""

    def __init__(self, fail_on_call=None, status=500):
        self.calls = []
        self.fail_on_call = fail_on_call
        self.status = status

    def handler(self, request):
        self.calls.append({
            "method": request.method,
            "url": str(request.url),
            "headers": request.headers,
            "children": json.loads(request.content)["children"],
        })
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            return httpx.Response(self.status, json={"object": "error", "message": "boom"})
        return httpx.Response(200, json={"object": "list", "results": []})

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class StubReformatter:
    def __init__(self, output):
        self.output = output
        self.prompts = []

    async def reformat(self, prompt):
        self.prompts.append(prompt)
        return self.output


@pytest.fixture
def settings():
    return Settings(notion_api_key="secret_test", notion_page_id="page-123")


@pytest.fixture
def notion():
    return RecordingNotion()

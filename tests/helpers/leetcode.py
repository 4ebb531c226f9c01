"""In-memory stand-ins for the outbound LeetCode HTTP session."""

import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """requests.Session の代わり（呼び出しを記録する）"""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse({"data": {"question": None}})
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def question_payload(content, title="Two Sum", difficulty="Easy", tags=("Array", "Hash Table")):
    return {
        "data": {
            "question": {
                "title": title,
                "content": content,
                "difficulty": difficulty,
                "topicTags": [{"name": t} for t in tags],
            }
        }
    }

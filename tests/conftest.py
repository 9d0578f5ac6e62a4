import json

import httpx
import pytest


def tender(number, title, **extra):
    doc = {
        "TenderNumber": number,
        "Title": title,
        "Tags": "construction",
        "Description": f"Description of {title}",
        "AISummary": f"Summary of {title}",
        "Source": "eTenders",
        "Province": "Gauteng",
        "Category": "Civil",
    }
    doc.update(extra)
    return doc


class FakeIndex:
    """
    Stands in for the OpenSearch REST API behind an httpx.MockTransport.
    Records every request body it receives.
    """

    def __init__(self, total=0, documents=None, status_code=200, body=None, error=None):
        self.total = total
        self.documents = documents or []
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests = []

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        if self.body is not None:
            if isinstance(self.body, (bytes, str)):
                return httpx.Response(self.status_code, content=self.body)
            return httpx.Response(self.status_code, json=self.body)

        return httpx.Response(
            self.status_code,
            json={
                "took": 3,
                "timed_out": False,
                "hits": {
                    "total": {"value": self.total, "relation": "eq"},
                    "max_score": 1.0,
                    "hits": [
                        {"_index": "tenders", "_id": str(i), "_score": 1.0, "_source": doc}
                        for i, doc in enumerate(self.documents)
                    ],
                },
            },
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_index():
    return FakeIndex()

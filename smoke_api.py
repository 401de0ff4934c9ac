#!/usr/bin/env python3
"""
Smoke test for a running hotels API.

Walks the full hotel lifecycle (list, create, read, update, delete)
against a live server and reports every failed step.

    python smoke_api.py --base-url http://127.0.0.1:8000
"""
import argparse
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

BASE_URL = "http://127.0.0.1:8000"
NOT_FOUND = "Hotel with id {id} is not found or has not been created"


@dataclass
class StepResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""


class HotelSmokeTester:
    def __init__(self, base_url: str = BASE_URL, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.results: List[StepResult] = []

    def call(self, method: str, endpoint: str, data: Optional[Dict] = None,
             expected_status: int = 200, description: str = "") -> Optional[Dict[str, Any]]:
        """Send one request and record whether it returned ``expected_status``."""
        url = f"{self.base_url}{endpoint}"
        start_time = time.time()
        try:
            response = self.session.request(method, url, json=data, timeout=self.timeout)
        except requests.RequestException as e:
            self._record(StepResult(False, endpoint, method, 0, time.time() - start_time, str(e), description))
            print(f"❌ {method} {endpoint} - error: {e}")
            return None
        response_time = time.time() - start_time
        ok = response.status_code == expected_status
        self._record(StepResult(
            success=ok,
            endpoint=endpoint,
            method=method,
            status_code=response.status_code,
            response_time=response_time,
            error_message="" if ok else response.text[:200],
            description=description,
        ))
        mark = "✅" if ok else "❌"
        print(f"{mark} {method} {endpoint} - {response.status_code} ({response_time:.2f}s) {description}")
        try:
            return response.json()
        except ValueError:
            return None

    def expect(self, condition: bool, description: str) -> None:
        self._record(StepResult(condition, "-", "CHECK", 0, 0.0, "" if condition else "check failed", description))
        print(f"{'✅' if condition else '❌'} {description}")

    def _record(self, result: StepResult) -> None:
        self.results.append(result)

    def run(self) -> bool:
        self.call("GET", "/healthz", description="health check")
        self.call("GET", "/hotels", description="list hotels")
        self.call("POST", "/hotels", {"address": "nowhere"}, 400, "create without name")

        body = self.call("POST", "/hotels", {"name": "Smoke Hotel", "address": "1 Test Road"}, 201, "create hotel")
        if not body or not body.get("data"):
            return self.report()
        hotel_id = body["data"]["id"]

        self.call("GET", f"/hotels/{hotel_id}", description="show hotel")
        body = self.call("PUT", f"/hotels/{hotel_id}", {"name": "Smoke Hotel 2", "address": "2 Test Road"},
                         description="update hotel")
        if body:
            self.expect(body.get("data", {}).get("name") == "Smoke Hotel 2", "update overwrote name")

        self.call("DELETE", f"/hotels/{hotel_id}", description="delete hotel")
        body = self.call("DELETE", f"/hotels/{hotel_id}", expected_status=404, description="delete again")
        if body:
            self.expect(body.get("message") == NOT_FOUND.format(id=hotel_id), "not-found message")

        body = self.call("GET", "/hotels", description="list after delete")
        if body:
            self.expect(hotel_id not in [h["id"] for h in body.get("data", [])], "deleted hotel not listed")
        return self.report()

    def report(self) -> bool:
        failed = [r for r in self.results if not r.success]
        print(f"\n{len(self.results) - len(failed)}/{len(self.results)} steps passed")
        for r in failed:
            print(f"  - {r.method} {r.endpoint} [{r.status_code}] {r.description}: {r.error_message}")
        return not failed


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--base-url", default=BASE_URL)
    args = parser.parse_args()
    return 0 if HotelSmokeTester(args.base_url).run() else 1


if __name__ == "__main__":
    sys.exit(main())

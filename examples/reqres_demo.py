"""End-to-end scenario against the public reqres.in demo API."""

from __future__ import annotations

import json
import logging
import os

from rest_manager import HttpMethod, RestManager, Results

BASE_URL = os.getenv("REST_MANAGER_DEMO_URL", "https://reqres.in/api").rstrip("/")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def print_headers(results: Results) -> None:
    if results.response is None:
        return
    print("\nResponse HTTP Headers:\n")
    for key, value in results.response.headers.all_values().items():
        print(" ", key, value)


def get_users_list(log_level: str) -> None:
    log_section("Step 1: List users (page 2)")
    with RestManager(log_level=log_level) as rest:
        # Produces {BASE_URL}/users?page=2
        rest.url_query_parameters.add("page", "2")
        results = rest.execute(f"{BASE_URL}/users", HttpMethod.GET).result()

    if results.error is not None:
        print(f"→ Request failed: {results.error!r}")
        return
    if results.data:
        payload = json.loads(results.data)
        for user in payload.get("data", []):
            print(f"  {user.get('id')}: {user.get('first_name')} {user.get('last_name')}")
    print_headers(results)


def get_non_existing_user(log_level: str) -> None:
    log_section("Step 2: Fetch a user that does not exist")

    def on_complete(results: Results) -> None:
        if results.response and results.response.http_status_code != 200:
            print(f"→ Request failed with HTTP status code {results.response.http_status_code}")

    with RestManager(log_level=log_level) as rest:
        rest.execute(f"{BASE_URL}/users/100", HttpMethod.GET, on_complete).result()


def create_user(log_level: str) -> None:
    log_section("Step 3: Create a user")
    with RestManager(log_level=log_level) as rest:
        rest.request_http_headers.add("Content-Type", "application/json")
        rest.http_body_parameters.add("name", "Frank Bara")
        rest.http_body_parameters.add("job", "Developer")
        results = rest.execute(f"{BASE_URL}/users", HttpMethod.POST).result()

    if results.response and results.response.http_status_code == 201 and results.data:
        created = json.loads(results.data)
        print(f"→ Created {created.get('name')} ({created.get('job')}) id={created.get('id')}")
    else:
        print(f"→ Unexpected outcome: {results}")


def main() -> None:
    log_level = os.getenv("REST_MANAGER_LOG", "info")
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    print(f"Using {BASE_URL}")
    get_users_list(log_level)
    get_non_existing_user(log_level)
    create_user(log_level)


if __name__ == "__main__":
    main()

import random
from locust import HttpUser, task, between, events

BASE_URL = "http://127.0.0.1:9000"

SIZES = ["small", "medium", "large", "", "huge"]
QUERIES = ["", "widget", "Gadget", "super tool", "Ultimate", "zzz"]
DATASTAR_HEADERS = {"datastar-request": "true"}

product_ids = []


def random_params():
    params = {"size": random.choice(SIZES)}
    query = random.choice(QUERIES)
    if query:
        params["query"] = query
    return params


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    global product_ids
    import requests

    print("=" * 60)
    print("Load test starting against", BASE_URL)
    print("=" * 60)

    try:
        for size in ("small", "medium", "large"):
            response = requests.get(f"{BASE_URL}/api/v1/search", params={"size": size}, timeout=10)
            if response.status_code == 200:
                product_ids.extend(p["id"] for p in response.json().get("items", []))
            else:
                print(f"Could not load {size} products: {response.status_code}")
        print(f"Loaded {len(product_ids)} product ids")
    except Exception as e:
        print(f"Product preload failed: {e}")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    print("\n" + "=" * 60)
    print("Load test finished")
    print("=" * 60)


class SearchUser(HttpUser):

    wait_time = between(1, 3)

    host = BASE_URL

    @task(5)
    def search_mpa(self):
        with self.client.get(
                "/search-mpa",
                params=random_params(),
                catch_response=True,
                name="GET /search-mpa (full page)"
        ) as response:
            if response.status_code == 200 and "<html" in response.text:
                response.success()
            else:
                response.failure(f"Status code: {response.status_code}")

    @task(5)
    def search_client_side_fragment(self):
        with self.client.get(
                "/search-update-url-client-side",
                params=random_params(),
                headers=DATASTAR_HEADERS,
                catch_response=True,
                name="GET /search-update-url-client-side (patch)"
        ) as response:
            if response.status_code == 200 and "datastar-patch-elements" in response.text:
                response.success()
            else:
                response.failure(f"Status code: {response.status_code}")

    @task(8)
    def search_server_patch_fragment(self):
        with self.client.get(
                "/search-server-patch",
                params=random_params(),
                headers=DATASTAR_HEADERS,
                catch_response=True,
                name="GET /search-server-patch (patch + script)"
        ) as response:
            if response.status_code != 200:
                response.failure(f"Status code: {response.status_code}")
            elif "replaceState" not in response.text:
                response.failure("Missing history script")
            else:
                response.success()

    @task(3)
    def search_server_patch_page(self):
        self.client.get("/search-server-patch", params=random_params(), name="GET /search-server-patch (full page)")

    @task(2)
    def view_product_details(self):
        if not product_ids:
            return

        product_id = random.choice(product_ids)
        self.client.get(f"/product/{product_id}", name="GET /product/{id}")

    @task(1)
    def search_api(self):
        self.client.get("/api/v1/search", params=random_params(), name="GET /api/v1/search")

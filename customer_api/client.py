# customer_api/client.py

import requests


class ApiClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class CustomerApiClient:
    """
    Thin HTTP client for the customer records API.
    Stores the token returned by login() and sends it on every later call.
    """

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = None

    def _headers(self):
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs):
        response = requests.request(
            method,
            f"{self.base_url}{path}",
            headers=self._headers(),
            timeout=self.timeout,
            **kwargs,
        )
        if response.status_code >= 400:
            raise ApiClientError(response.status_code, response.text)
        return response

    # -------------------------------
    # Authentication
    # -------------------------------

    def register(self, username, name, password, gender=None, location=None) -> str:
        payload = {"username": username, "name": name, "password": password}
        if gender is not None:
            payload["gender"] = gender
        if location is not None:
            payload["location"] = location
        return self._request("POST", "/register", json=payload).text

    def login(self, username, password) -> str:
        data = self._request("POST", "/login", json={"username": username, "password": password}).json()
        self.token = data["token"]
        return self.token

    def me(self) -> dict:
        return self._request("GET", "/users/me").json()

    # -------------------------------
    # Customers
    # -------------------------------

    def list_customers(self) -> list[dict]:
        return self._request("GET", "/customers").json()

    def add_customer(self, name, email, phone, company=None) -> str:
        payload = {"name": name, "email": email, "phone": phone, "company": company}
        return self._request("POST", "/customers", json=payload).text

    def update_customer(self, customer_id, name, email, phone, company=None) -> str:
        payload = {"name": name, "email": email, "phone": phone, "company": company}
        return self._request("PUT", f"/customers/{customer_id}", json=payload).text

    def delete_customer(self, customer_id) -> str:
        return self._request("DELETE", f"/customers/{customer_id}").text

    def health(self) -> dict:
        return self._request("GET", "/health").json()

import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:3001")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})


class ApiError(Exception):
    """Non-2xx reply. `status` is the HTTP code, `body` the decoded JSON (or {})."""
    def __init__(self, status: int, body: dict):
        super().__init__(body.get("error") or f"request failed ({status})")
        self.status = status
        self.body = body


def _post(path: str, payload: dict, timeout: int = 20) -> dict:
    r = S.post(f"{API}{path}", json=payload, timeout=timeout)
    try:
        body = r.json()
    except ValueError:
        body = {}
    if not r.ok:
        raise ApiError(r.status_code, body)
    return body

def health():        r=S.get(f"{API}/health",timeout=10); r.raise_for_status(); return r.json()
def contact(b):      return _post("/api/contact", b)
def register(b):     return _post("/api/register", b)
def insert(table, b):return _post(f"/api/insert/{table}", b)

import sys
import tempfile
from pathlib import Path

# ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient
from tasktracker.main import create_app

db_path = Path(tempfile.mkdtemp()) / "quick.db"
app = create_app(f"sqlite:///{db_path}")

with TestClient(app) as client:
    r = client.post("/signup", json={
        "first_name": "Quick",
        "last_name": "Tester",
        "email": "quick_test_user@example.com",
        "password": "correct_horse",
    })
    print('status', r.status_code)
    try:
        print('json:', r.json())
    except Exception:
        print('text:', r.text)

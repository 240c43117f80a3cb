import os

SECRET_KEY = os.environ.get("SECRET_KEY", "CHANGE_ME_SECRET_KEY")
ALGORITHM = os.environ.get("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = float(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

# bcrypt work factor
BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 10))

# Default to local SQLite for dev/tests; override via env in Docker/Prod
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./tasktracker.db")

# When false, updatetask/giveremarks look the task up by task_id alone
ENFORCE_TASK_OWNERSHIP = os.environ.get("ENFORCE_TASK_OWNERSHIP", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 4000))

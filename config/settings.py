#config/settings

import os
from dotenv import load_dotenv

# Load variables from the .env file
load_dotenv()

# JWT settings
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "3"))


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./kidavu.db")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

AVATAR_DIRECTORY = os.getenv("AVATAR_DIRECTORY", "static/avatars")
# URL path the avatar directory is served under, whatever its location on disk
AVATAR_URL_PATH = "/static/avatars"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

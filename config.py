# config.py
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("HEALTHY_DIARY_DATABASE_URL", "sqlite:///healthy_diary.db")
SECRET_KEY = os.getenv("HEALTHY_DIARY_SECRET_KEY", "change-me")  # set in .env for real use
LOG_LEVEL = os.getenv("HEALTHY_DIARY_LOG_LEVEL", "INFO")
CITY = os.getenv("HEALTHY_DIARY_CITY", "Seoul")

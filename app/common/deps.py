# app/common/deps.py

from app.services.greeting_service import GreetingService

def get_greeting_service() -> GreetingService:
    return GreetingService()

# app/services/greeting_service.py

from app.models.greeting import GreetResponse

OWNER_INTRODUCTION = "My name is Rajan Yadav"

class GreetingService:
    """
    Builds every response body the API returns.
    Names are interpolated as-is: no trimming, no escaping.
    """

    def introduce(self) -> str:
        return OWNER_INTRODUCTION

    def hello_world(self) -> str:
        return "Hello World"

    def greet(self, name: str) -> str:
        return f"Hello {name}"

    def greet_json(self, name: str) -> GreetResponse:
        return GreetResponse(message=self.greet(name))

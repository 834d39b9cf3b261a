# app/models/greeting.py

from pydantic import BaseModel

class GreetResponse(BaseModel):
    message: str

class PingResponse(BaseModel):
    message: str = "pong"
